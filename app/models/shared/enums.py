from sqlalchemy.orm import declarative_base
from enum import Enum

Base = declarative_base()

# Enums
class ResourceType(str, Enum):
    DEPARTMENT = "Department"
    EMPLOYEE = "Employee"
    CANDIDATE = "Candidate"
    JOB_APPLICATION = "JobApplication"
    LEAVE_REQUEST = "LeaveRequest"

class OwnershipScope(str, Enum):
    ALL = "all"
    YOURS = "yours"

class AccessRequestStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    DENIED = "Denied"

class DelegationStatus(str, Enum):
    ACTIVE = "Active"
    REVOKED = "Revoked"
    EXPIRED = "Expired"    # computed at read time, never stored

class GrantReason(str, Enum):
    OWNER = "owner"
    DELEGATION = "delegation"
    ACCESS_REQUEST = "access_request"
    NONE = "none"

class EmploymentStatus(str, Enum):
    ACTIVE = "Active"
    ON_LEAVE = "OnLeave"
    TERMINATED = "Terminated"

class JobApplicationStatus(str, Enum):
    APPLIED = "Applied"
    UNDER_REVIEW = "UnderReview"
    SHORTLISTED = "Shortlisted"
    INTERVIEW = "Interview"
    OFFERED = "Offered"
    REJECTED = "Rejected"
    HIRED = "Hired"
    WITHDRAWN = "Withdrawn"

class LeaveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"

class LeaveType(str, Enum):
    ANNUAL = "Annual"
    SICK = "Sick"
    UNPAID = "Unpaid"
    OTHER = "Other"
