# __init__.py
from oneapply.models.profile import UserProfileRecord

__all__ = [
	"UserProfileRecord",
]
