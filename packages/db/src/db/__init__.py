# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, SessionLocal, engine, get_db
from .enums import ChatRole, DisbursalSpeed, DocsLevel, LoanType, UserRole
from .models import ChatMessage, DemoDataManifest, Product

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "__version__",
    # Enums
    "ChatRole",
    "DisbursalSpeed",
    "DocsLevel",
    "LoanType",
    "UserRole",
    # Models
    "ChatMessage",
    "DemoDataManifest",
    "Product",
]
