"""複数のイベントで共有される型

https://api.slack.com/events
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from slack_event_kit.event.ids import (
    AppID,
    BotID,
    ChannelID,
    CommentID,
    FileID,
    SubTeamID,
    TeamID,
    UserID,
)
from slack_event_kit.event.timestamp import TimeStamp


@runtime_checkable
class Typer(Protocol):
    """自身のイベント種別を返せるペイロードのProtocol"""

    def event_type(self) -> str: ...


class TypedEvent(BaseModel, frozen=True):
    """typeフィールドを持つイベントの基底クラス

    RTM API、Events APIともに、全てのイベントはイベント種別を表すtypeを持つ。
    https://api.slack.com/rtm#events
    https://api.slack.com/events-api#event_type_structure
    """

    type: str = ""

    def event_type(self) -> str:
        return self.type


class BotIcons(BaseModel, frozen=True):
    image_36: str = ""
    image_48: str = ""
    image_72: str = ""


class Bot(BaseModel, frozen=True):
    id: BotID = BotID("")
    app_id: AppID = AppID("")
    name: str = ""
    icons: BotIcons | None = None


class Comment(BaseModel, frozen=True):
    id: CommentID = CommentID("")
    created: TimeStamp | None = None
    user: UserID = UserID("")
    comment: str = ""


class FileReaction(BaseModel, frozen=True):
    name: str = ""
    count: int = 0
    users: list[UserID] = Field(default_factory=list)


class File(BaseModel, frozen=True):
    """ファイルオブジェクト

    RTMイベントに含まれるファイルの多くはidのみを持つ。
    https://api.slack.com/types/file
    """

    id: FileID = FileID("")
    created: TimeStamp | None = None
    name: str = ""
    title: str = ""
    mimetype: str = ""
    filetype: str = ""
    pretty_type: str = ""
    user: UserID = UserID("")
    mode: str = ""
    editable: bool = False
    is_external: bool = False
    external_type: str = ""
    username: str = ""
    size: int = 0
    url_private: str = ""
    url_private_download: str = ""
    thumb_64: str = ""
    thumb_80: str = ""
    thumb_160: str = ""
    thumb_360: str = ""
    thumb_360_gif: str = ""
    thumb_360_w: int = 0
    thumb_360_h: int = 0
    thumb_480: str = ""
    thumb_480_w: int = 0
    thumb_480_h: int = 0
    permalink: str = ""
    permalink_public: str = ""
    edit_link: str = ""
    preview: str = ""
    preview_highlight: str = ""
    lines: int = 0
    lines_more: int = 0
    is_public: bool = False
    public_url_shared: bool = False
    display_as_bot: bool = False
    channels: list[ChannelID] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)
    ims: list[str] = Field(default_factory=list)
    initial_comment: Comment | None = None
    num_stars: int = 0
    is_starred: bool = False
    pinned_to: list[str] = Field(default_factory=list)
    reactions: list[FileReaction] = Field(default_factory=list)
    comments_count: int = 0


class FileRef(BaseModel, frozen=True):
    """file_*イベントに含まれるファイル参照

    idはイベントのfile_idと同じ値になる。
    https://api.slack.com/events/file_change
    """

    id: FileID = FileID("")


class SubTeam(BaseModel, frozen=True):
    """ユーザーグループ

    user_countは文字列で渡されることがあるため、数値へ変換して保持する。
    """

    id: SubTeamID = SubTeamID("")
    team_id: TeamID = TeamID("")
    is_usergroup: bool = False
    name: str = ""
    description: str = ""
    handle: str = ""
    is_external: bool = False
    date_create: TimeStamp | None = None
    date_update: TimeStamp | None = None
    date_delete: TimeStamp | None = None
    auto_type: str | None = None
    created_by: UserID = UserID("")
    updated_by: UserID = UserID("")
    user_count: int = 0
    users: list[UserID] = Field(default_factory=list)


class UserProfile(BaseModel, frozen=True):
    first_name: str = ""
    last_name: str = ""
    real_name: str = ""
    real_name_normalized: str = ""
    display_name: str = ""
    email: str = ""
    skype: str = ""
    phone: str = ""
    image_24: str = ""
    image_32: str = ""
    image_48: str = ""
    image_72: str = ""
    image_192: str = ""
    image_original: str = ""
    title: str = ""


class User(BaseModel, frozen=True):
    id: UserID = UserID("")
    team_id: TeamID = TeamID("")
    name: str = ""
    deleted: bool = False
    color: str = ""
    real_name: str = ""
    tz: str = ""
    tz_label: str = ""
    tz_offset: int = 0
    profile: UserProfile | None = None
    is_bot: bool = False
    is_admin: bool = False
    is_owner: bool = False
    is_primary_owner: bool = False
    is_restricted: bool = False
    is_ultra_restricted: bool = False
    has_2fa: bool = False
    has_files: bool = False
    presence: str = ""
