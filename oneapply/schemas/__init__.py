# __init__.py
from oneapply.schemas.profile import NormalizedProfile, ProfileLookupRequest, ProfileResponse, ProfileUpdate
from oneapply.schemas.search import AppliedPreferences, ErrorResponse, MatchReasons, SearchRequest, UserProfileApplied

__all__ = [
	"NormalizedProfile",
	"ProfileLookupRequest",
	"ProfileResponse",
	"ProfileUpdate",
	"AppliedPreferences",
	"ErrorResponse",
	"MatchReasons",
	"SearchRequest",
	"UserProfileApplied",
]
