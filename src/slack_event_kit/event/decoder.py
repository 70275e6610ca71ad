"""typeフィールドを判別子として具象イベントへデコードする"""

from collections.abc import Mapping
from typing import Any

from slack_event_kit.event import events, message
from slack_event_kit.event.common import TypedEvent
from slack_event_kit.event.exceptions import UnknownPayloadTypeError
from slack_event_kit.event.payload import (
    RawPayload,
    dumps_for_message,
    parse_payload,
    read_discriminator,
    validate_as,
)

EVENT_TYPES: dict[str, type[TypedEvent]] = {
    "accounts_changed": events.AccountsChanged,
    "app_home_opened": events.AppHomeOpened,
    "app_mention": events.AppMention,
    "app_uninstalled": events.AppUninstalled,
    "bot_added": events.BotAdded,
    "bot_changed": events.BotChanged,
    "channel_archive": events.ChannelArchived,
    "channel_created": events.ChannelCreated,
    "channel_deleted": events.ChannelDeleted,
    "channel_history_changed": events.ChannelHistoryChanged,
    "channel_id_changed": events.ChannelIDChanged,
    "channel_joined": events.ChannelJoined,
    "channel_left": events.ChannelLeft,
    "channel_marked": events.ChannelMarked,
    "channel_rename": events.ChannelRenamed,
    "channel_shared": events.ChannelShared,
    "channel_unarchive": events.ChannelUnarchived,
    "channel_unshared": events.ChannelUnshared,
    "commands_changed": events.CommandsChanged,
    "dnd_updated": events.DNDUpdated,
    "dnd_updated_user": events.DNDUpdatedUser,
    "email_domain_changed": events.EmailDomainChanged,
    "emoji_changed": events.EmojiChanged,
    "file_change": events.FileChanged,
    "file_comment_added": events.FileCommentAdded,
    "file_comment_deleted": events.FileCommentDeleted,
    "file_comment_edited": events.FileCommentEdited,
    "file_created": events.FileCreated,
    "file_deleted": events.FileDeleted,
    "file_public": events.FilePublished,
    "file_shared": events.FileShared,
    "file_unshared": events.FileUnshared,
    "goodbye": events.GoodBye,
    "grid_migration_finished": events.GridMigrationFinished,
    "grid_migration_started": events.GridMigrationStarted,
    "group_archive": events.GroupArchived,
    "group_close": events.GroupClosed,
    "group_deleted": events.GroupDeleted,
    "group_history_changed": events.GroupHistoryChanged,
    "group_joined": events.GroupJoined,
    "group_left": events.GroupLeft,
    "group_marked": events.GroupMarked,
    "group_open": events.GroupOpened,
    "group_rename": events.GroupRenamed,
    "group_unarchive": events.GroupUnarchived,
    "hello": events.Hello,
    "im_close": events.IMClosed,
    "im_created": events.IMCreated,
    "im_history_changed": events.IMHistoryChanged,
    "im_marked": events.IMMarked,
    "im_open": events.IMOpened,
    "link_shared": events.LinkShared,
    "manual_presence_change": events.PresenceManuallyChanged,
    "member_joined_channel": events.MemberJoinedChannel,
    "member_left_channel": events.MemberLeftChannel,
    "message": message.Message,
    "pin_added": events.PinAdded,
    "pin_removed": events.PinRemoved,
    "pref_change": events.PreferenceChanged,
    "presence_change": events.PresenceChanged,
    "presence_query": events.PresenceQuery,
    "presence_sub": events.PresenceSubscribe,
    "reaction_added": events.ReactionAdded,
    "reaction_removed": events.ReactionRemoved,
    "reconnect_url": events.ReconnectURL,
    "scope_denied": events.ScopeDenied,
    "scope_granted": events.ScopeGranted,
    "star_added": events.StarAdded,
    "star_removed": events.StarRemoved,
    "subteam_created": events.SubTeamCreated,
    "subteam_members_changed": events.SubTeamMembersChanged,
    "subteam_self_added": events.SubTeamSelfAdded,
    "subteam_self_removed": events.SubTeamSelfRemoved,
    "subteam_updated": events.SubTeamUpdated,
    "team_domain_change": events.TeamDomainChanged,
    "team_join": events.TeamJoined,
    "team_migration_started": events.TeamMigrationStarted,
    "team_plan_change": events.TeamPlanChanged,
    "team_pref_change": events.TeamPreferenceChanged,
    "team_profile_change": events.TeamProfileChanged,
    "team_profile_delete": events.TeamProfileDeleted,
    "team_profile_reorder": events.TeamProfileReordered,
    "team_rename": events.TeamRenamed,
    "tokens_revoked": events.TokensRevoked,
    "user_change": events.UserChanged,
    "user_typing": events.UserTyping,
}

# https://api.slack.com/events/message#message_subtypes
MESSAGE_SUBTYPES: dict[str, type[message.MiscMessage]] = {
    "bot_message": message.BotMessage,
    "channel_archive": message.MiscMessage,
    "channel_join": message.ChannelJoinMessage,
    "channel_leave": message.MiscMessage,
    "channel_name": message.MiscMessage,
    "channel_purpose": message.MiscMessage,
    "channel_topic": message.MiscMessage,
    "channel_unarchive": message.MiscMessage,
    "file_comment": message.MiscMessage,
    "file_mention": message.MiscMessage,
    "file_share": message.FileShareMessage,
    "group_archive": message.MiscMessage,
    "group_join": message.MiscMessage,
    "group_leave": message.MiscMessage,
    "group_name": message.MiscMessage,
    "group_purpose": message.MiscMessage,
    "group_topic": message.MiscMessage,
    "group_unarchive": message.MiscMessage,
    "me_message": message.MeMessage,
    "message_changed": message.MessageChanged,
    "message_deleted": message.MessageDeleted,
    "message_replied": message.MessageReplied,
    "pinned_item": message.MiscMessage,
    "thread_broadcast": message.ThreadBroadcast,
    "unpinned_item": message.MiscMessage,
}

MESSAGE_CHANNEL_TYPES: dict[str, type[message.Message]] = {
    "app_home": message.AppHomeMessage,
    "channel": message.ChannelMessage,
    "group": message.GroupMessage,
    "mpim": message.GroupMessage,
    "im": message.IMMessage,
}


def decode(payload: RawPayload) -> TypedEvent:
    """ペイロードを具象イベントへデコードする

    Args:
        payload: 1イベント分の生のJSON

    Returns:
        TypedEvent: typeに対応する具象イベント

    Raises:
        EmptyPayloadError: 前後の空白を除いて空の場合
        MalformedPayloadError: JSONとして不正、typeが文字列でない、またはフィールドのデコードに失敗した場合
        UnknownPayloadTypeError: type, subtype, channel_typeのいずれかに対応するイベントが登録されていない場合
    """
    return map_event(parse_payload(payload))


def map_event(parsed: Mapping[str, Any]) -> TypedEvent:
    """読み込み済みのJSONオブジェクトを具象イベントへ振り分けてデコードする

    Events APIのエンベロープやRTM APIのフレームから取り出したイベントもここを通す。
    """
    type_value = read_discriminator(parsed)
    mapping = _resolve(type_value, parsed)
    return validate_as(mapping, parsed)


def _resolve(type_value: str, parsed: Mapping[str, Any]) -> type[TypedEvent]:
    if type_value == "message":
        # サブタイプなしの通常のメッセージはchannel_typeで区別する
        if "subtype" in parsed:
            subtype = parsed["subtype"]
            mapping = MESSAGE_SUBTYPES.get(subtype) if isinstance(subtype, str) else None
            if mapping is None:
                msg = f"unknown subtype of {subtype} is given: {dumps_for_message(parsed)}"
                raise UnknownPayloadTypeError(msg, str(subtype))
            return mapping

        if "channel_type" in parsed:
            channel_type = parsed["channel_type"]
            mapping = MESSAGE_CHANNEL_TYPES.get(channel_type) if isinstance(channel_type, str) else None
            if mapping is None:
                msg = f"unknown channel_type of {channel_type} is given: {dumps_for_message(parsed)}"
                raise UnknownPayloadTypeError(msg, str(channel_type))
            return mapping

    mapping = EVENT_TYPES.get(type_value)
    if mapping is None:
        msg = f"unknown type of {type_value} is given: {dumps_for_message(parsed)}"
        raise UnknownPayloadTypeError(msg, type_value)
    return mapping
