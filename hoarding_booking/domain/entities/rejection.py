from enum import Enum


class RejectionReason(str, Enum):
    booked_date = "BookedDate"
    lead_time_violation = "LeadTimeViolation"
    too_short = "TooShort"
    too_long = "TooLong"
    crosses_booked = "CrossesBooked"
