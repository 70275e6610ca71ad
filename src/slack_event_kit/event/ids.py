"""Slackオブジェクトの識別子型"""

from enum import StrEnum
from typing import NewType

AppID = NewType("AppID", str)
BotID = NewType("BotID", str)
ChannelID = NewType("ChannelID", str)
UserID = NewType("UserID", str)
FileID = NewType("FileID", str)
TeamID = NewType("TeamID", str)
SubTeamID = NewType("SubTeamID", str)
CommentID = NewType("CommentID", str)
EventID = NewType("EventID", str)
BlockID = NewType("BlockID", str)
ActionID = NewType("ActionID", str)


class ConversationType(StrEnum):
    IM = "im"
    MPIM = "mpim"
    PRIVATE = "private"
    PUBLIC = "public"
