"""Message Formatting — status and error strings returned to clients."""

from ems.core.domain_types import EmployeeId
from ems.core.format_messages import (
    format_toggled, format_claimed, format_deleted, format_missing,
    format_no_records, format_invalid_rating, format_not_transferable,
    format_not_employer, format_empty_field,
)


def test_status_messages():
    assert format_toggled(EmployeeId(3), True) == (
        "Employee with ID: 3 has transferable toggled to: true"
    )
    assert format_toggled(EmployeeId(3), False).endswith("toggled to: false")
    assert format_claimed(EmployeeId(3)) == (
        "Employee with ID: 3 has been added to your employ"
    )
    assert format_deleted(EmployeeId(3)) == "Employee with ID: 3 has been deleted"


def test_error_messages():
    assert format_missing(EmployeeId(9)) == "No employee with id=9 found"
    assert format_no_records() == "No employee records found"
    assert format_not_transferable(EmployeeId(9)) == (
        "Employee with ID: 9 is not transferable"
    )
    assert format_not_employer("rate") == "Cannot rate an employee you did not employ"
    assert format_empty_field("email") == "email cannot be empty"


def test_invalid_rating_lists_all_values_in_order():
    assert format_invalid_rating() == (
        'Invalid rating type! Accepted values are: '
        '["excellent", "good", "average", "satisfactory", "poor"]'
    )
