# parkinglot

Tools for administering a parking lot. Users sign up and log in. An
administrator then records a lot's name and location, an hourly rate and a
capacity for each standard vehicle type (car, bike, bus, minivan), the number
of handicapped spots, and any number of custom vehicle rates.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
parkinglot
```

This starts an interactive session that reads commands from standard input,
one per line. Arguments with spaces can be quoted. It starts on the login
page.

On the login page:

- `login EMAIL PASSWORD` logs in and goes to role selection.
- `signup` goes to the sign-up page.

On the sign-up page:

- `signup EMAIL PASSWORD` creates an account and returns to the login page.
- `login` goes back to the login page.

On the role selection page:

- `admin` opens the parking lot form.
- `user` shows a notice that the user interface was chosen.

In the parking lot form:

- `name TEXT`, `location TEXT` set the lot's name and location.
- `rate KIND VALUE`, `capacity KIND VALUE` set the hourly rate or capacity of
  `car`, `bike`, `bus` or `minivan`.
- `handicapped COUNT` sets the number of handicapped spots.
- `custom TYPE RATE CAPACITY` adds a custom vehicle rate.
- `list` shows the custom rates, numbered from 1.
- `edit ROW` takes a custom rate out of the list and back into the inputs.
- `delete ROW` removes a custom rate.
- `save` checks the form, prints the lot's summary and clears the form.
- `close` closes the form and returns to role selection.

`help` prints the list of commands at any time; `quit` or `exit` ends the
session.

## Library use

### Accounts

`UserDatabase` holds accounts keyed by e-mail address. Signing up with an
empty e-mail or password, or with an address that is already registered,
raises `AuthError`. A login with an unknown address or a wrong password also
raises `AuthError`.

```python
from parkinglot.accounts import AuthError, UserDatabase

password = "password"
users = UserDatabase()
users.sign_up("driver@example.com", password)
users.log_in("driver@example.com", password)

try:
    users.sign_up("driver@example.com", password)
except AuthError as exc:
    print(exc)  # Account already exists.
```

`Session` follows the flow between pages (`Page.LOGIN`, `Page.SIGN_UP`,
`Page.ROLE_SELECT`). `login()` goes to role selection, `signup()` returns to
the login page, `switch_signup()` and `switch_login()` move between the two,
`open_admin()` hides the main window and returns the `AdminForm` (created
once and kept), `close_admin()` comes back to role selection, and
`select_user()` returns the notice for the user role.

### Administration form

`AdminForm` collects a parking lot's details:

- `validate()` raises `InputError` when the lot name or the location is blank.
- `save()` checks the form, returns a `ParkingLot`, and clears the form. The
  lot's `summary()` gives a readable report of its rates (NPR per hour) and
  capacities.
- `add_custom_rate()` adds the custom vehicle type held in
  `custom_vehicle_name`, `custom_rate` and `custom_capacity` to
  `custom_vehicles` and returns the new entry. It raises `InputError` if the
  type name is blank or the rate is not positive.
- `edit_custom_rate(row)` takes an entry out of the list and puts its type and
  rate back into the inputs. `delete_custom_rate(row)` removes an entry. Both
  return the entry and raise `NoSelectionError` when `row` is `None` or out of
  range.
- `clear()` resets every field and empties the custom rate list.

Custom rate entries are the text of a `CustomRate`, such as
`Truck - NPR 150/hr (Capacity: 4)`. `parse_custom_rate` reads the vehicle type
and rate back out of such a line as a tuple, or returns `None` when the line
does not have that shape. Numbers are written with `format_number`:

```python
from parkinglot.admin import format_number, parse_custom_rate

format_number(150.0)  # "150"
format_number(2.5)    # "2.5"
parse_custom_rate("Truck - NPR 150/hr (Capacity: 4)")  # ("Truck", 150.0)
```

## What it does not do

Accounts and saved lots live only in memory: nothing is written to disk, and
everything is gone when the session ends. Passwords are kept as given, not
hashed. Choosing the user role only shows a notice; there is no interface for
parking or removing vehicles.