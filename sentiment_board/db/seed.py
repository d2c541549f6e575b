from pathlib import Path
from typing import Any, Dict, List

import yaml

from sentiment_board.db.models.comments import ADMIN_OWNER_ID
from sentiment_board.features.comments.schemas import CommentCreateIn
from sentiment_board.features.comments.services import CommentService
from sentiment_board.features.users.schemas import UserCreate
from sentiment_board.features.users.services import UserService

DEFAULT_SEED_PATH = Path(__file__).with_name("seed_data.yaml")


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed YAML must contain a root mapping.")
    return data


# -----------------------------
# Seeders
# -----------------------------
def seed_users(user_svc: UserService, data: Dict[str, Any]) -> Dict[str, int]:
    """Inscrit les users du YAML ; retourne username -> id."""
    users_yaml: List[Dict[str, Any]] = data.get("users") or []
    ids: Dict[str, int] = {}
    for item in users_yaml:
        user = user_svc.register(
            UserCreate(
                username=item["username"],
                password=item["password"],
                confirm_password=item["password"],
            )
        )
        ids[user.username] = user.id
    return ids


def seed_comments(
    comment_svc: CommentService,
    user_svc: UserService,
    data: Dict[str, Any],
    user_ids: Dict[str, int],
) -> int:
    comments_yaml: List[Dict[str, Any]] = data.get("comments") or []
    for item in comments_yaml:
        username = item.get("user")
        if username is None:
            owner_id = ADMIN_OWNER_ID
        elif username in user_ids:
            owner_id = user_ids[username]
        else:
            owner_id = user_svc.get_by_username(username).id

        comment_svc.add(
            CommentCreateIn(text=item["text"], category=item["category"]),
            user_id=owner_id,
        )
    return len(comments_yaml)


# -----------------------------
# Main entrypoint
# -----------------------------
def seed_all(
    user_svc: UserService,
    comment_svc: CommentService,
    data: Dict[str, Any],
) -> Dict[str, int]:
    user_ids = seed_users(user_svc, data)
    comments = seed_comments(comment_svc, user_svc, data, user_ids)
    return {"users": len(user_ids), "comments": comments}
