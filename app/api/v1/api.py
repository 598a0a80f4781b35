from fastapi import APIRouter
from app.api.v1.endpoints.access import access_requests, delegations
from app.api.v1.endpoints.owned_resources import build_owned_resource_router
from app.schemas.hr.employee_schema import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from app.schemas.hr.leave_request_schema import LeaveRequestCreate, LeaveRequestResponse, LeaveRequestUpdate
from app.schemas.organization.department_schema import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from app.schemas.recruitment.candidate_schema import CandidateCreate, CandidateResponse, CandidateUpdate
from app.schemas.recruitment.job_application_schema import (
    JobApplicationCreate, JobApplicationResponse, JobApplicationUpdate
)
from app.services.hr.employee_service import EmployeeService
from app.services.hr.leave_request_service import LeaveRequestService
from app.services.organization.department_service import DepartmentService
from app.services.recruitment.candidate_service import CandidateService
from app.services.recruitment.job_application_service import JobApplicationService

api_router = APIRouter()

# Access control routes
api_router.include_router(access_requests.router, prefix="/accessrequests", tags=["Access Requests"])
api_router.include_router(delegations.router, prefix="/delegations", tags=["Delegations"])

# Organization routes
api_router.include_router(
    build_owned_resource_router(DepartmentService, DepartmentCreate, DepartmentUpdate, DepartmentResponse),
    prefix="/departments", tags=["Organization"],
)

# HR routes
api_router.include_router(
    build_owned_resource_router(EmployeeService, EmployeeCreate, EmployeeUpdate, EmployeeResponse),
    prefix="/employees", tags=["Human Resource"],
)
api_router.include_router(
    build_owned_resource_router(LeaveRequestService, LeaveRequestCreate, LeaveRequestUpdate, LeaveRequestResponse),
    prefix="/leaverequests", tags=["Human Resource"],
)

# Recruitment routes
api_router.include_router(
    build_owned_resource_router(CandidateService, CandidateCreate, CandidateUpdate, CandidateResponse),
    prefix="/candidates", tags=["Recruitment"],
)
api_router.include_router(
    build_owned_resource_router(
        JobApplicationService, JobApplicationCreate, JobApplicationUpdate, JobApplicationResponse
    ),
    prefix="/jobapplications", tags=["Recruitment"],
)
