"""messageを除くイベントの型定義

https://api.slack.com/events
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, SerializeAsAny, field_validator

from slack_event_kit.event.block import Block, decode_block
from slack_event_kit.event.common import Bot, Comment, File, FileRef, SubTeam, TypedEvent, User
from slack_event_kit.event.ids import ChannelID, CommentID, FileID, SubTeamID, TeamID, UserID
from slack_event_kit.event.message import Message
from slack_event_kit.event.payload import decode_embedded
from slack_event_kit.event.timestamp import TimeStamp
from slack_event_kit.event.view import View


class Item(BaseModel, frozen=True):
    """リアクションやピン留めの対象

    typeは "message", "file", "file_comment" のいずれか。
    """

    type: str = ""
    channel: ChannelID = ChannelID("")
    message: Message | None = None
    file: File | None = None
    comment: Comment | None = None
    file_comment: CommentID = CommentID("")
    ts: TimeStamp | None = None


class CreatedChannel(BaseModel, frozen=True):
    id: ChannelID = ChannelID("")
    name: str = ""
    created: TimeStamp | None = None
    creator: UserID = UserID("")


class RenamedChannel(BaseModel, frozen=True):
    id: ChannelID = ChannelID("")
    name: str = ""
    created: TimeStamp | None = None


class IMChannel(BaseModel, frozen=True):
    id: ChannelID = ChannelID("")


class DNDStatus(BaseModel, frozen=True):
    dnd_enabled: bool = False
    next_dnd_start_ts: TimeStamp | None = None
    next_dnd_end_ts: TimeStamp | None = None
    snooze_enabled: bool = False
    snooze_endtime: TimeStamp | None = None


class ProfileField(BaseModel, frozen=True):
    id: str = ""
    ordering: int = 0


class ChangedTeamProfile(BaseModel, frozen=True):
    # 変更されたフィールドの定義のみが含まれる
    fields: list[ProfileField] = Field(default_factory=list)


class DeletedTeamProfile(BaseModel, frozen=True):
    fields: list[str] = Field(default_factory=list)


class SharedLink(BaseModel, frozen=True):
    domain: str = ""
    url: str = ""


class RevokedTokens(BaseModel, frozen=True):
    oauth: list[UserID] = Field(default_factory=list)
    bot: list[UserID] = Field(default_factory=list)


class HistoryChanged(TypedEvent, frozen=True):
    """大量のメッセージが変更され、履歴の再取得が必要になったことを表すイベントの基底クラス"""

    latest: TimeStamp | None = None
    ts: TimeStamp | None = None
    event_ts: TimeStamp | None = None


class MarkedAsRead(TypedEvent, frozen=True):
    """既読位置が更新されたことを表すイベントの基底クラス"""

    channel: ChannelID = ChannelID("")
    ts: TimeStamp | None = None


class FileEvent(TypedEvent, frozen=True):
    file_id: FileID = FileID("")
    file: FileRef | None = None


class AccountsChanged(TypedEvent, frozen=True):
    """サインインしているアカウントの一覧が変わった

    https://api.slack.com/events/accounts_changed
    """

    type: Literal["accounts_changed"] = "accounts_changed"


class AppHomeOpened(TypedEvent, frozen=True):
    """ユーザーがApp Homeを開いた

    viewはHomeタブを開いた場合のみ含まれる。
    https://api.slack.com/events/app_home_opened
    """

    type: Literal["app_home_opened"] = "app_home_opened"
    user: UserID = UserID("")
    channel: ChannelID = ChannelID("")
    tab: str = ""  # "home" または "messages"
    event_ts: TimeStamp | None = None
    view: View | None = None


class AppMention(TypedEvent, frozen=True):
    """https://api.slack.com/events/app_mention"""

    type: Literal["app_mention"] = "app_mention"
    user: UserID = UserID("")
    text: str = ""
    ts: TimeStamp | None = None
    thread_ts: TimeStamp | None = None
    channel: ChannelID = ChannelID("")
    team: TeamID = TeamID("")
    client_msg_id: str = ""
    event_ts: TimeStamp | None = None
    blocks: list[SerializeAsAny[Block]] = Field(default_factory=list)

    @field_validator("blocks", mode="before")
    @classmethod
    def _decode_blocks(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [decode_embedded(block, decode_block, Block, "block of app_mention") for block in value]


class AppUninstalled(TypedEvent, frozen=True):
    type: Literal["app_uninstalled"] = "app_uninstalled"


class BotAdded(TypedEvent, frozen=True):
    type: Literal["bot_added"] = "bot_added"
    bot: Bot | None = None


class BotChanged(TypedEvent, frozen=True):
    type: Literal["bot_changed"] = "bot_changed"
    bot: Bot | None = None


class ChannelArchived(TypedEvent, frozen=True):
    type: Literal["channel_archive"] = "channel_archive"
    channel: ChannelID = ChannelID("")
    user: UserID = UserID("")


class ChannelCreated(TypedEvent, frozen=True):
    type: Literal["channel_created"] = "channel_created"
    channel: CreatedChannel | None = None


class ChannelDeleted(TypedEvent, frozen=True):
    type: Literal["channel_deleted"] = "channel_deleted"
    channel: ChannelID = ChannelID("")


class ChannelHistoryChanged(HistoryChanged, frozen=True):
    type: Literal["channel_history_changed"] = "channel_history_changed"


class ChannelIDChanged(TypedEvent, frozen=True):
    """Enterprise Gridへの移行などでチャンネルIDが変わった"""

    type: Literal["channel_id_changed"] = "channel_id_changed"
    old_channel_id: ChannelID = ChannelID("")
    new_channel_id: ChannelID = ChannelID("")
    event_ts: TimeStamp | None = None


class ChannelJoined(TypedEvent, frozen=True):
    type: Literal["channel_joined"] = "channel_joined"
    channel: ChannelID = ChannelID("")


class ChannelLeft(TypedEvent, frozen=True):
    type: Literal["channel_left"] = "channel_left"
    channel: ChannelID = ChannelID("")


class ChannelMarked(MarkedAsRead, frozen=True):
    type: Literal["channel_marked"] = "channel_marked"


class ChannelRenamed(TypedEvent, frozen=True):
    type: Literal["channel_rename"] = "channel_rename"
    channel: RenamedChannel | None = None


class ChannelShared(TypedEvent, frozen=True):
    type: Literal["channel_shared"] = "channel_shared"
    connected_team_id: TeamID = TeamID("")
    channel: ChannelID = ChannelID("")
    event_ts: TimeStamp | None = None


class ChannelUnarchived(TypedEvent, frozen=True):
    type: Literal["channel_unarchive"] = "channel_unarchive"
    channel: ChannelID = ChannelID("")
    user: UserID = UserID("")


class ChannelUnshared(TypedEvent, frozen=True):
    type: Literal["channel_unshared"] = "channel_unshared"
    previously_connected_team_id: TeamID = TeamID("")
    channel: ChannelID = ChannelID("")
    is_ext_shared: bool = False
    event_ts: TimeStamp | None = None


class CommandsChanged(TypedEvent, frozen=True):
    type: Literal["commands_changed"] = "commands_changed"
    event_ts: TimeStamp | None = None


class DNDUpdated(TypedEvent, frozen=True):
    """自身のおやすみモードが変わった"""

    type: Literal["dnd_updated"] = "dnd_updated"
    user: UserID = UserID("")
    dnd_status: DNDStatus | None = None


class DNDUpdatedUser(TypedEvent, frozen=True):
    """他のメンバーのおやすみモードが変わった

    スヌーズに関するフィールドは含まれない。
    """

    type: Literal["dnd_updated_user"] = "dnd_updated_user"
    user: UserID = UserID("")
    dnd_status: DNDStatus | None = None


class EmailDomainChanged(TypedEvent, frozen=True):
    type: Literal["email_domain_changed"] = "email_domain_changed"
    email_domain: str = ""
    event_ts: TimeStamp | None = None


class EmojiChanged(TypedEvent, frozen=True):
    type: Literal["emoji_changed"] = "emoji_changed"
    subtype: str = ""  # "add" または "remove"
    name: str = ""
    names: list[str] = Field(default_factory=list)
    value: str = ""
    event_ts: TimeStamp | None = None


class FileChanged(FileEvent, frozen=True):
    type: Literal["file_change"] = "file_change"


class FileCommentAdded(FileEvent, frozen=True):
    type: Literal["file_comment_added"] = "file_comment_added"
    comment: Comment | None = None


class FileCommentDeleted(FileEvent, frozen=True):
    type: Literal["file_comment_deleted"] = "file_comment_deleted"
    comment: CommentID = CommentID("")


class FileCommentEdited(FileEvent, frozen=True):
    type: Literal["file_comment_edited"] = "file_comment_edited"
    comment: Comment | None = None


class FileCreated(FileEvent, frozen=True):
    type: Literal["file_created"] = "file_created"


class FileDeleted(TypedEvent, frozen=True):
    type: Literal["file_deleted"] = "file_deleted"
    file_id: FileID = FileID("")
    event_ts: TimeStamp | None = None


class FilePublished(FileEvent, frozen=True):
    type: Literal["file_public"] = "file_public"


class FileShared(FileEvent, frozen=True):
    type: Literal["file_shared"] = "file_shared"


class FileUnshared(FileEvent, frozen=True):
    type: Literal["file_unshared"] = "file_unshared"


class GoodBye(TypedEvent, frozen=True):
    """サーバーが接続を閉じようとしている"""

    type: Literal["goodbye"] = "goodbye"


class GridMigrationFinished(TypedEvent, frozen=True):
    type: Literal["grid_migration_finished"] = "grid_migration_finished"
    enterprise_id: str = ""


class GridMigrationStarted(TypedEvent, frozen=True):
    type: Literal["grid_migration_started"] = "grid_migration_started"
    enterprise_id: str = ""


class GroupArchived(TypedEvent, frozen=True):
    type: Literal["group_archive"] = "group_archive"
    channel: ChannelID = ChannelID("")


class GroupClosed(TypedEvent, frozen=True):
    type: Literal["group_close"] = "group_close"
    user: UserID = UserID("")
    channel: ChannelID = ChannelID("")


class GroupDeleted(TypedEvent, frozen=True):
    type: Literal["group_deleted"] = "group_deleted"
    channel: ChannelID = ChannelID("")


class GroupHistoryChanged(HistoryChanged, frozen=True):
    type: Literal["group_history_changed"] = "group_history_changed"


class GroupJoined(TypedEvent, frozen=True):
    type: Literal["group_joined"] = "group_joined"
    channel: ChannelID = ChannelID("")


class GroupLeft(TypedEvent, frozen=True):
    type: Literal["group_left"] = "group_left"
    channel: ChannelID = ChannelID("")


class GroupMarked(MarkedAsRead, frozen=True):
    type: Literal["group_marked"] = "group_marked"


class GroupOpened(TypedEvent, frozen=True):
    type: Literal["group_open"] = "group_open"
    user: UserID = UserID("")
    channel: ChannelID = ChannelID("")


class GroupRenamed(TypedEvent, frozen=True):
    type: Literal["group_rename"] = "group_rename"
    channel: RenamedChannel | None = None


class GroupUnarchived(TypedEvent, frozen=True):
    type: Literal["group_unarchive"] = "group_unarchive"
    channel: ChannelID = ChannelID("")


class Hello(TypedEvent, frozen=True):
    """WebSocket接続が確立した

    https://api.slack.com/events/hello
    """

    type: Literal["hello"] = "hello"


class IMClosed(TypedEvent, frozen=True):
    type: Literal["im_close"] = "im_close"
    user: UserID = UserID("")
    channel: ChannelID = ChannelID("")


class IMCreated(TypedEvent, frozen=True):
    type: Literal["im_created"] = "im_created"
    user: UserID = UserID("")
    channel: IMChannel | None = None


class IMHistoryChanged(HistoryChanged, frozen=True):
    type: Literal["im_history_changed"] = "im_history_changed"


class IMMarked(MarkedAsRead, frozen=True):
    type: Literal["im_marked"] = "im_marked"


class IMOpened(TypedEvent, frozen=True):
    type: Literal["im_open"] = "im_open"
    user: UserID = UserID("")
    channel: ChannelID = ChannelID("")


class LinkShared(TypedEvent, frozen=True):
    """登録したドメインのURLが投稿された

    https://api.slack.com/events/link_shared
    """

    type: Literal["link_shared"] = "link_shared"
    channel: ChannelID = ChannelID("")
    user: UserID = UserID("")
    message_ts: TimeStamp | None = None
    thread_ts: TimeStamp | None = None
    links: list[SharedLink] = Field(default_factory=list)


class PresenceManuallyChanged(TypedEvent, frozen=True):
    type: Literal["manual_presence_change"] = "manual_presence_change"
    presence: str = ""


class MemberJoinedChannel(TypedEvent, frozen=True):
    """https://api.slack.com/events/member_joined_channel"""

    type: Literal["member_joined_channel"] = "member_joined_channel"
    user: UserID = UserID("")
    channel: ChannelID = ChannelID("")
    channel_type: str = ""  # "C" または "G"
    team: TeamID = TeamID("")
    inviter: UserID = UserID("")  # 自分で参加した場合は空


class MemberLeftChannel(TypedEvent, frozen=True):
    type: Literal["member_left_channel"] = "member_left_channel"
    user: UserID = UserID("")
    channel: ChannelID = ChannelID("")
    channel_type: str = ""
    team: TeamID = TeamID("")


class PinAdded(TypedEvent, frozen=True):
    type: Literal["pin_added"] = "pin_added"
    user: UserID = UserID("")
    channel_id: ChannelID = ChannelID("")
    item: Item | None = None
    event_ts: TimeStamp | None = None


class PinRemoved(TypedEvent, frozen=True):
    type: Literal["pin_removed"] = "pin_removed"
    user: UserID = UserID("")
    channel_id: ChannelID = ChannelID("")
    item: Item | None = None
    has_pins: bool = False
    event_ts: TimeStamp | None = None


class PreferenceChanged(TypedEvent, frozen=True):
    type: Literal["pref_change"] = "pref_change"
    name: str = ""
    # 設定項目によって文字列、真偽値、数値のいずれにもなる
    value: Any = None


class PresenceChanged(TypedEvent, frozen=True):
    type: Literal["presence_change"] = "presence_change"
    user: UserID = UserID("")
    users: list[UserID] = Field(default_factory=list)  # バッチで通知された場合
    presence: str = ""


class PresenceQuery(TypedEvent, frozen=True):
    """指定したユーザーのプレゼンス状態を問い合わせるRTMフレーム"""

    type: Literal["presence_query"] = "presence_query"
    ids: list[UserID] = Field(default_factory=list)


class PresenceSubscribe(TypedEvent, frozen=True):
    """指定したユーザーのプレゼンス変更を購読するRTMフレーム"""

    type: Literal["presence_sub"] = "presence_sub"
    ids: list[UserID] = Field(default_factory=list)


class ReactionAdded(TypedEvent, frozen=True):
    type: Literal["reaction_added"] = "reaction_added"
    user: UserID = UserID("")
    reaction: str = ""
    item_user: UserID = UserID("")
    item: Item | None = None
    event_ts: TimeStamp | None = None


class ReactionRemoved(TypedEvent, frozen=True):
    type: Literal["reaction_removed"] = "reaction_removed"
    user: UserID = UserID("")
    reaction: str = ""
    item_user: UserID = UserID("")
    item: Item | None = None
    event_ts: TimeStamp | None = None


class ReconnectURL(TypedEvent, frozen=True):
    """実験的なイベントのため、中身は扱わない

    https://api.slack.com/events/reconnect_url
    """

    type: Literal["reconnect_url"] = "reconnect_url"


class ScopeDenied(TypedEvent, frozen=True):
    type: Literal["scope_denied"] = "scope_denied"
    scopes: list[str] = Field(default_factory=list)
    trigger_id: str = ""


class ScopeGranted(TypedEvent, frozen=True):
    type: Literal["scope_granted"] = "scope_granted"
    scopes: list[str] = Field(default_factory=list)
    trigger_id: str = ""


class StarAdded(TypedEvent, frozen=True):
    type: Literal["star_added"] = "star_added"
    user: UserID = UserID("")
    item: Item | None = None
    event_ts: TimeStamp | None = None


class StarRemoved(TypedEvent, frozen=True):
    type: Literal["star_removed"] = "star_removed"
    user: UserID = UserID("")
    item: Item | None = None
    event_ts: TimeStamp | None = None


class SubTeamCreated(TypedEvent, frozen=True):
    type: Literal["subteam_created"] = "subteam_created"
    subteam: SubTeam | None = None


class SubTeamMembersChanged(TypedEvent, frozen=True):
    """ユーザーグループのメンバーが変わった

    件数は文字列で渡されるため、数値へ変換して保持する。
    """

    type: Literal["subteam_members_changed"] = "subteam_members_changed"
    subteam_id: SubTeamID = SubTeamID("")
    team_id: TeamID = TeamID("")
    date_previous_update: TimeStamp | None = None
    date_update: TimeStamp | None = None
    added_users: list[UserID] = Field(default_factory=list)
    added_users_count: int = 0
    removed_users: list[UserID] = Field(default_factory=list)
    removed_users_count: int = 0


class SubTeamSelfAdded(TypedEvent, frozen=True):
    type: Literal["subteam_self_added"] = "subteam_self_added"
    subteam_id: SubTeamID = SubTeamID("")


class SubTeamSelfRemoved(TypedEvent, frozen=True):
    type: Literal["subteam_self_removed"] = "subteam_self_removed"
    subteam_id: SubTeamID = SubTeamID("")


class SubTeamUpdated(TypedEvent, frozen=True):
    type: Literal["subteam_updated"] = "subteam_updated"
    subteam: SubTeam | None = None


class TeamDomainChanged(TypedEvent, frozen=True):
    type: Literal["team_domain_change"] = "team_domain_change"
    url: str = ""
    domain: str = ""


class TeamJoined(TypedEvent, frozen=True):
    type: Literal["team_join"] = "team_join"
    user: User | None = None


class TeamMigrationStarted(TypedEvent, frozen=True):
    """ワークスペースがサーバー間で移行される

    この直後にWebSocket接続が閉じられる。
    https://api.slack.com/events/team_migration_started
    """

    type: Literal["team_migration_started"] = "team_migration_started"


class TeamPlanChanged(TypedEvent, frozen=True):
    type: Literal["team_plan_change"] = "team_plan_change"
    plan: str = ""  # "", "std", "plus" など
    can_add_ura: bool = False
    paid_features: list[str] = Field(default_factory=list)


class TeamPreferenceChanged(TypedEvent, frozen=True):
    type: Literal["team_pref_change"] = "team_pref_change"
    name: str = ""
    value: Any = None


class TeamProfileChanged(TypedEvent, frozen=True):
    type: Literal["team_profile_change"] = "team_profile_change"
    profile: ChangedTeamProfile | None = None


class TeamProfileDeleted(TypedEvent, frozen=True):
    type: Literal["team_profile_delete"] = "team_profile_delete"
    profile: DeletedTeamProfile | None = None


class TeamProfileReordered(TypedEvent, frozen=True):
    type: Literal["team_profile_reorder"] = "team_profile_reorder"
    profile: ChangedTeamProfile | None = None


class TeamRenamed(TypedEvent, frozen=True):
    type: Literal["team_rename"] = "team_rename"
    name: str = ""


class TokensRevoked(TypedEvent, frozen=True):
    type: Literal["tokens_revoked"] = "tokens_revoked"
    tokens: RevokedTokens | None = None


class UserChanged(TypedEvent, frozen=True):
    type: Literal["user_change"] = "user_change"
    user: User | None = None


class UserTyping(TypedEvent, frozen=True):
    type: Literal["user_typing"] = "user_typing"
    channel: ChannelID = ChannelID("")
    user: UserID = UserID("")
