import io
import sys

from parkinglot.cli import main

SIGNED_IN = (
    "signup\n"
    "signup someone@example.com password\n"
    "login someone@example.com password\n"
)


def run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_full_admin_flow(monkeypatch, capsys):
    script = SIGNED_IN + (
        "admin\n"
        'name "Central Lot"\n'
        "location Kathmandu\n"
        "rate car 50\n"
        "capacity car 20\n"
        "handicapped 3\n"
        "save\n"
        "quit\n"
    )
    code, out = run(monkeypatch, capsys, script)
    assert code == 0
    assert "Account created. Please log in." in out
    assert "Parking lot 'Central Lot' saved successfully!" in out
    assert "Handicapped Spots: 3" in out


def test_login_failure_reported(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "login someone@example.com password\n")
    assert code == 0
    assert "Login Failed: Invalid email or password." in out


def test_save_without_name(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, SIGNED_IN + "admin\nsave\n")
    assert "Input Error: Please enter a parking lot name." in out
    assert "saved successfully" not in out


def test_custom_rates(monkeypatch, capsys):
    script = SIGNED_IN + "admin\ncustom Truck 12.5 3\nlist\ndelete 1\ndelete 1\n"
    code, out = run(monkeypatch, capsys, script)
    assert "1. Truck - NPR 12.5/hr (Capacity: 3)" in out
    assert "Deleted: Truck - NPR 12.5/hr (Capacity: 3)" in out
    assert "No Selection: Please select an item to delete." in out


def test_admin_needs_role_page(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "admin\n")
    assert code == 0
    assert "Unknown command: admin" in out


def test_bad_number(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, SIGNED_IN + "admin\nrate car lots\n")
    assert "Input Error: Invalid number: lots" in out


def test_duplicate_signup(monkeypatch, capsys):
    script = "signup\nsignup someone@example.com password\nsignup\nsignup someone@example.com password\n"
    code, out = run(monkeypatch, capsys, script)
    assert "Sign Up Failed: Account already exists." in out