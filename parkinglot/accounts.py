"""User accounts and the navigation between login, sign-up and role pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from parkinglot.admin import AdminForm


class AuthError(Exception):
    """Raised when signing up or logging in fails."""


class Page(Enum):
    """The pages of the main window."""

    LOGIN = "login"
    SIGN_UP = "sign_up"
    ROLE_SELECT = "role_select"


class UserDatabase:
    """In-memory mapping of e-mail addresses to passwords."""

    def __init__(self) -> None:
        self._users: dict[str, str] = {}

    def __contains__(self, email: object) -> bool:
        return email in self._users

    def __len__(self) -> int:
        return len(self._users)

    def sign_up(self, email: str, password: str) -> None:
        """Register a new account."""
        if not email or not password:
            raise AuthError("Email and password cannot be empty.")
        if email in self._users:
            raise AuthError("Account already exists.")
        self._users[email] = password

    def log_in(self, email: str, password: str) -> None:
        """Check the credentials, raising AuthError if they do not match."""
        if email not in self._users or self._users[email] != password:
            raise AuthError("Invalid email or password.")


@dataclass
class Session:
    """State of the application's main window."""

    users: UserDatabase = field(default_factory=UserDatabase)
    page: Page = Page.LOGIN
    visible: bool = True
    admin_form: AdminForm | None = None
    admin_open: bool = False

    def login(self, email: str, password: str) -> None:
        """Log in and go to the role selection page."""
        self.users.log_in(email, password)
        self.page = Page.ROLE_SELECT

    def signup(self, email: str, password: str) -> str:
        """Create an account, return to the login page and return the notice."""
        self.users.sign_up(email, password)
        self.page = Page.LOGIN
        return "Account created. Please log in."

    def switch_signup(self) -> None:
        self.page = Page.SIGN_UP

    def switch_login(self) -> None:
        self.page = Page.LOGIN

    def open_admin(self) -> AdminForm:
        """Hide the main window and show the admin form, created once."""
        if self.admin_form is None:
            self.admin_form = AdminForm()
        self.visible = False
        self.admin_open = True
        return self.admin_form

    def close_admin(self) -> None:
        """Close the admin form and come back to role selection."""
        self.admin_open = False
        self.visible = True
        self.page = Page.ROLE_SELECT

    def select_user(self) -> str:
        """Return the notice shown when the user role is chosen."""
        return "Navigating to user interface."