import pytest

from parkinglot.accounts import AuthError, Page, Session, UserDatabase

EMAIL = "someone@example.com"


def test_sign_up_then_log_in():
    users = UserDatabase()
    users.sign_up(EMAIL, "password")
    assert EMAIL in users
    assert len(users) == 1
    users.log_in(EMAIL, "password")
    assert len(users) == 1


@pytest.mark.parametrize("email,password", [("", "password"), (EMAIL, ""), ("", "")])
def test_sign_up_rejects_empty(email, password):
    users = UserDatabase()
    with pytest.raises(AuthError, match="Email and password cannot be empty."):
        users.sign_up(email, password)
    assert len(users) == 0


def test_sign_up_rejects_duplicate():
    users = UserDatabase()
    users.sign_up(EMAIL, "password")
    with pytest.raises(AuthError, match="Account already exists."):
        users.sign_up(EMAIL, "secret")
    users.log_in(EMAIL, "password")
    assert len(users) == 1


def test_log_in_wrong_password():
    users = UserDatabase()
    users.sign_up(EMAIL, "password")
    with pytest.raises(AuthError, match="Invalid email or password."):
        users.log_in(EMAIL, "secret")


def test_log_in_unknown_email():
    with pytest.raises(AuthError, match="Invalid email or password."):
        UserDatabase().log_in(EMAIL, "password")


def test_session_starts_on_login_page():
    session = Session()
    assert session.page is Page.LOGIN
    assert session.visible is True


def test_session_signup_flow():
    session = Session()
    session.switch_signup()
    assert session.page is Page.SIGN_UP
    notice = session.signup(EMAIL, "password")
    assert notice == "Account created. Please log in."
    assert session.page is Page.LOGIN
    session.login(EMAIL, "password")
    assert session.page is Page.ROLE_SELECT


def test_failed_signup_stays_on_page():
    session = Session()
    session.switch_signup()
    with pytest.raises(AuthError):
        session.signup("", "password")
    assert session.page is Page.SIGN_UP


def test_failed_login_stays_on_page():
    session = Session()
    with pytest.raises(AuthError):
        session.login(EMAIL, "password")
    assert session.page is Page.LOGIN


def test_switch_login():
    session = Session()
    session.switch_signup()
    session.switch_login()
    assert session.page is Page.LOGIN


def test_admin_form_is_reused():
    session = Session()
    first = session.open_admin()
    assert session.visible is False
    assert session.admin_open is True
    first.name = "Central"
    session.close_admin()
    second = session.open_admin()
    assert second is first
    assert second.name == "Central"


def test_close_admin_returns_to_role_select():
    session = Session()
    session.open_admin()
    session.close_admin()
    assert session.visible is True
    assert session.admin_open is False
    assert session.page is Page.ROLE_SELECT


def test_select_user_notice():
    assert "user interface" in Session().select_user()