"""
➡️ But : Interface terminal minimale au-dessus des services.

Console : boucle de menus numérotés (click.prompt / click.echo) pour les users et l'admin.

Les erreurs métier et de stockage sont attrapées ici, affichées, puis on revient au menu.
Les saisies invalides (choix hors menu, ID non numérique, confirmation différente)
sont refusées par click qui repose la question.
"""

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import click

from sentiment_board.cli.dependencies import Container
from sentiment_board.db.errors import StoreError
from sentiment_board.db.models.comments import Category, Comment
from sentiment_board.db.models.users import User
from sentiment_board.features.authentication.services import InvalidCredentialsError
from sentiment_board.features.comments.schemas import CommentCreateIn, CommentUpdateIn
from sentiment_board.features.users.schemas import UserCreate, UserUpdate
from sentiment_board.features.users.services import ConflictError

logger = logging.getLogger(__name__)

# erreurs affichées à l'utilisateur sans quitter le menu (ValidationError est un ValueError)
HANDLED_ERRORS = (StoreError, ConflictError, InvalidCredentialsError, ValueError)

CATEGORIES = [category.value for category in Category]
UNCHANGED = "(unchanged)"


class Console:
    def __init__(self, container: Container):
        self.c = container

    # --------------- Helpers ---------------
    def _header(self, title: str) -> None:
        click.echo(click.style("=" * 40, fg="yellow"))
        click.echo(click.style(f"= {title.center(36)} =", fg="yellow", bold=True))
        click.echo(click.style("=" * 40, fg="yellow"))

    def _success(self, message: str) -> None:
        click.echo(click.style(message, fg="green"))

    def _error(self, message: str) -> None:
        click.echo(click.style(f"Error: {message}", fg="red"))

    def _choose(self, label: str, options: Sequence[str]) -> str:
        for number, option in enumerate(options, start=1):
            click.echo(f"  {number}. {option}")
        number = click.prompt(label, type=click.IntRange(1, len(options)))
        return options[number - 1]

    def _ask_int(self, label: str) -> int:
        return click.prompt(label, type=int)

    def _ask_text(self, label: str, *, allow_empty: bool = False) -> str:
        if allow_empty:
            return click.prompt(label, default="", show_default=False).strip()
        return click.prompt(label).strip()

    def _ask_category(self, *, allow_empty: bool = False) -> Optional[str]:
        options = CATEGORIES + ([UNCHANGED] if allow_empty else [])
        choice = self._choose("Kategori", options)
        return None if choice == UNCHANGED else choice

    def _print_comments(self, rows: Iterable[Tuple[int, Comment]]) -> None:
        count = 0
        for number, comment in rows:
            out = self.c.comment_service.to_out(comment)
            click.echo(f"{number:>3} | #{out.id:<4} | {out.owner_username:<12} | {out.category:<8} | {out.text}")
            count += 1
        if count == 0:
            click.echo("(no comments)")

    def _print_dense(self, comments: List[Comment]) -> None:
        self._print_comments(enumerate(comments, start=1))

    def _print_sparse(self, result: dict) -> None:
        self._print_comments((position + 1, comment) for position, comment in result.items())

    def _print_users(self, rows: Iterable[Tuple[int, User]]) -> None:
        count = 0
        for number, user in rows:
            click.echo(f"{number:>3} | {user.username}")
            count += 1
        if count == 0:
            click.echo("(no users)")

    def _guard(self, action: Callable[[], None]) -> None:
        try:
            action()
        except HANDLED_ERRORS as e:
            logger.debug("action failed: %s", e)
            self._error(str(e))

    # --------------- Main menu ---------------
    def run(self) -> None:
        try:
            while True:
                self._header(self.c.settings.APP_NAME.upper())
                choice = self._choose("Pilih Menu", ["Register", "Login", "Admin", "Exit"])
                if choice == "Register":
                    self._guard(self.register)
                elif choice == "Login":
                    self._guard(self.login)
                elif choice == "Admin":
                    self._guard(self.admin)
                else:
                    return
        except click.Abort:
            # stdin fermé ou Ctrl+C
            click.echo("")

    def register(self) -> None:
        self._header("REGISTER")
        username = self._ask_text("Username")
        password = click.prompt("Password", hide_input=True, confirmation_prompt="Confirm Password")
        user = self.c.user_service.register(
            UserCreate(username=username, password=password, confirm_password=password)
        )
        self._success(f"User {user.username} registered")

    def login(self) -> None:
        self._header("LOGIN")
        username = self._ask_text("Username")
        password = click.prompt("Password", hide_input=True)
        user = self.c.auth_service.sign_in(username, password)
        self._success(f"Welcome, {user.username}")
        self.user_menu(user)

    def admin(self) -> None:
        self._header("ADMIN MENU")
        if self.c.auth_service.admin_required():
            self.c.auth_service.admin_sign_in(click.prompt("Masukkan Password Admin", hide_input=True))
        self.admin_menu()

    # --------------- User menu ---------------
    def user_menu(self, user: User) -> None:
        svc = self.c.comment_service
        options = [
            "Lihat Komentar", "Komentar Saya", "Tambah Komentar", "Edit Komentar",
            "Hapus Komentar", "Cari Komentar", "Urutkan Komentar", "Logout",
        ]
        while True:
            self._header(f"USER MENU ({user.username})")
            choice = self._choose("Pilih Menu", options)
            if choice == "Lihat Komentar":
                self._print_dense(svc.list())
            elif choice == "Komentar Saya":
                self._print_sparse(svc.list_for_user(user.id))
            elif choice == "Tambah Komentar":
                self._guard(lambda: self._add_comment(user.id))
            elif choice == "Edit Komentar":
                self._guard(lambda: self._edit_comment(user.id))
            elif choice == "Hapus Komentar":
                self._guard(lambda: self._delete_comment(user.id))
            elif choice == "Cari Komentar":
                self._print_sparse(svc.search(self._ask_text("Cari", allow_empty=True)))
            elif choice == "Urutkan Komentar":
                self._sort_comments()
            else:
                return

    def _add_comment(self, user_id: Optional[int]) -> None:
        text = self._ask_text("Komentar")
        category = self._ask_category()
        payload = CommentCreateIn(text=text, category=category)
        if user_id is None:
            comment = self.c.comment_service.add_as_admin(payload)
        else:
            comment = self.c.comment_service.add(payload, user_id=user_id)
        self._success(f"Comment #{comment.id} added")

    def _edit_comment(self, user_id: Optional[int]) -> None:
        comment_id = self._ask_int("ID Komentar")
        text = self._ask_text("Komentar (kosongkan jika tidak diubah)", allow_empty=True)
        category = self._ask_category(allow_empty=True)
        payload = CommentUpdateIn(text=text, category=category)
        if user_id is None:
            self.c.comment_service.update_any(comment_id, payload)
        else:
            self.c.comment_service.update_own(comment_id, payload, user_id=user_id)
        self._success(f"Comment #{comment_id} updated")

    def _delete_comment(self, user_id: Optional[int]) -> None:
        comment_id = self._ask_int("ID Komentar")
        if user_id is None:
            self.c.comment_service.delete_any(comment_id)
        else:
            self.c.comment_service.delete_own(comment_id, user_id=user_id)
        self._success(f"Comment #{comment_id} deleted")

    def _sort_comments(self) -> None:
        field = self._choose("Urutkan berdasarkan", ["Panjang Komentar", "Kategori"])
        ascending = self._choose("Mode", ["Ascending", "Descending"]) == "Ascending"
        if field == "Kategori":
            self._print_dense(self.c.comment_service.sorted_by_category(ascending))
        else:
            self._print_dense(self.c.comment_service.sorted_by_length(ascending))

    # --------------- Admin menu ---------------
    def admin_menu(self) -> None:
        while True:
            self._header("ADMIN MENU")
            choice = self._choose("Pilih Menu", ["Lihat Komentar", "Lihat User", "Lihat Grafik", "Exit"])
            if choice == "Lihat Komentar":
                self.admin_comments()
            elif choice == "Lihat User":
                self.admin_users()
            elif choice == "Lihat Grafik":
                self.show_summary()
            else:
                return

    def admin_users(self) -> None:
        svc = self.c.user_service
        while True:
            self._header("DATA USER")
            self._print_users(enumerate(svc.list(), start=1))
            choice = self._choose("Pilih Menu", ["Search", "Add", "Edit", "Delete", "Exit"])
            if choice == "Search":
                result = svc.search(self._ask_text("Masukkan Username yang ingin dicari", allow_empty=True))
                self._print_users((position + 1, user) for position, user in result.items())
            elif choice == "Add":
                self._guard(self.register)
            elif choice == "Edit":
                self._guard(self._edit_user)
            elif choice == "Delete":
                self._guard(self._delete_user)
            else:
                return

    def _edit_user(self) -> None:
        # numéro affiché (1-based) -> position dans le stockage
        position = self._ask_int("Masukkan Nomor User yang ingin diubah") - 1
        username = self._ask_text("Username (kosongkan jika tidak diubah)", allow_empty=True)
        password = click.prompt(
            "Password (kosongkan jika tidak diubah)",
            default="",
            show_default=False,
            hide_input=True,
            confirmation_prompt="Confirm Password",
        )
        user = self.c.user_service.update_at(
            position, UserUpdate(username=username, password=password, confirm_password=password)
        )
        self._success(f"User {user.username} updated")

    def _delete_user(self) -> None:
        position = self._ask_int("Masukkan Nomor User yang ingin dihapus") - 1
        self.c.user_service.delete_at(position)
        self._success("User deleted")

    def admin_comments(self) -> None:
        svc = self.c.comment_service
        while True:
            self._header("DATA KOMENTAR")
            self._print_dense(svc.list())
            choice = self._choose("Pilih Menu", ["Search", "Add", "Edit", "Delete", "Sort", "Exit"])
            if choice == "Search":
                self._print_sparse(svc.search(self._ask_text("Cari", allow_empty=True)))
            elif choice == "Add":
                self._guard(lambda: self._add_comment(None))
            elif choice == "Edit":
                self._guard(lambda: self._edit_comment(None))
            elif choice == "Delete":
                self._guard(lambda: self._delete_comment(None))
            elif choice == "Sort":
                self._sort_comments()
            else:
                return

    def show_summary(self) -> None:
        summary = self.c.comment_service.summary()
        self._header("GRAFIK")
        total = summary.total or 1
        for label, value in (
            ("Positif", summary.positive),
            ("Netral", summary.neutral),
            ("Negatif", summary.negative),
        ):
            bar = click.style("#" * round(20 * value / total), fg="cyan")
            click.echo(f"{label:<8} {value:>4} {bar}")
        click.echo(f"{'Total':<8} {summary.total:>4}")
        click.echo(f"Users    {self.c.user_service.count():>4}")
