from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class UserEntity:
    id: str
    name: str
    real_name: Optional[str] = None
    display_name: Optional[str] = None
    title: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    team_id: Optional[str] = None
    is_bot: Optional[bool] = None
    is_deleted: Optional[bool] = None
    is_app_user: Optional[bool] = None
    image_original: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)
