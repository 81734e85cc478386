"""Per-resource-group facades over the shared :class:`~infomark.transport.Transport`."""

from .account import Account
from .auth import Auth
from .base import Endpoint
from .common import Common
from .courses import Courses
from .email import Email
from .enrollments import Enrollments
from .exams import Exams
from .grades import Grades
from .groups import Groups
from .internal import Internal
from .materials import Materials
from .sheets import Sheets
from .submissions import Submissions
from .tasks import Tasks
from .users import Users

__all__ = [
    'Account',
    'Auth',
    'Common',
    'Courses',
    'Email',
    'Endpoint',
    'Enrollments',
    'Exams',
    'Grades',
    'Groups',
    'Internal',
    'Materials',
    'Sheets',
    'Submissions',
    'Tasks',
    'Users',
]
