# models/__init__.py
# Инициализация моделей

from .user import User
from .hackathon import Hackathon
from .track import Track
from .team import Team, TeamMember
from .submission import Submission
from .judge import Judge
from .review import Review
