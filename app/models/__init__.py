from app.models.access.access_request import AccessRequest
from app.models.access.admin_delegation import AdminDelegation
from app.models.organization.department import Department
from app.models.hr.employee import Employee
from app.models.hr.leave_request import LeaveRequest
from app.models.recruitment.candidate import Candidate
from app.models.recruitment.job_application import JobApplication


__all__ = [
    "AccessRequest",
    "AdminDelegation",
    "Department",
    "Employee",
    "LeaveRequest",
    "Candidate",
    "JobApplication",
]
