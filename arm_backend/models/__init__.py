# arm_backend/models/__init__.py
from .user import User, UserSession
from .member import Member
from .member_profile import MemberProfile
from .cotisation import Cotisation
from .content import Leadership, ProgramItem, News, Event
from .donation import Donation
from .message import ContactMessage, InternalMessage
from .chat import PublicChatMessage
from .geography import LegacyRegion, Region, Cercle, Commune
from .media import Media
from .conference import VideoConference
from .election import ElectionResult

__all__ = [
    "User",
    "UserSession",
    "Member",
    "MemberProfile",
    "Cotisation",
    "Leadership",
    "ProgramItem",
    "News",
    "Event",
    "Donation",
    "ContactMessage",
    "InternalMessage",
    "PublicChatMessage",
    "LegacyRegion",
    "Region",
    "Cercle",
    "Commune",
    "Media",
    "VideoConference",
    "ElectionResult",
]
