"""
Tris en place utilisés par les repositories.

selection_sort n'est pas stable : deux éléments de même clé peuvent être inversés.
insertion_sort est stable : l'ordre d'origine des égalités est conservé.
"""

from typing import Any, Callable, List, TypeVar

T = TypeVar("T")


def selection_sort(items: List[T], key: Callable[[T], Any], *, ascending: bool = True) -> List[T]:
    n = len(items)
    for i in range(n - 1):
        index = i
        for j in range(i + 1, n):
            if ascending:
                if key(items[j]) < key(items[index]):
                    index = j
            elif key(items[j]) > key(items[index]):
                index = j
        if index != i:
            items[i], items[index] = items[index], items[i]
    return items


def insertion_sort(items: List[T], key: Callable[[T], Any], *, ascending: bool = True) -> List[T]:
    for i in range(1, len(items)):
        current = items[i]
        current_key = key(current)
        j = i - 1
        if ascending:
            while j >= 0 and key(items[j]) > current_key:
                items[j + 1] = items[j]
                j -= 1
        else:
            while j >= 0 and key(items[j]) < current_key:
                items[j + 1] = items[j]
                j -= 1
        items[j + 1] = current
    return items
