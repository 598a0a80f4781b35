"""create hr portal tables with ownership, access requests and delegations

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:02:11.418305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

resource_type = sa.Enum('DEPARTMENT', 'EMPLOYEE', 'CANDIDATE', 'JOB_APPLICATION', 'LEAVE_REQUEST', name='resource_type')
access_request_status = sa.Enum('PENDING', 'APPROVED', 'DENIED', name='access_request_status')
delegation_status = sa.Enum('ACTIVE', 'REVOKED', 'EXPIRED', name='delegation_status')
employment_status = sa.Enum('ACTIVE', 'ON_LEAVE', 'TERMINATED', name='employment_status')
job_application_status = sa.Enum(
    'APPLIED', 'UNDER_REVIEW', 'SHORTLISTED', 'INTERVIEW', 'OFFERED', 'REJECTED', 'HIRED', 'WITHDRAWN',
    name='job_application_status',
)
leave_status = sa.Enum('PENDING', 'APPROVED', 'REJECTED', 'CANCELLED', name='leave_status')
leave_type = sa.Enum('ANNUAL', 'SICK', 'UNPAID', 'OTHER', name='leave_type')


def _base_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True)),
    ]


def upgrade():
    op.create_table(
        'departments',
        *_base_columns(),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('description', sa.Text()),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('owner_admin_id', sa.String(100)),
    )
    op.create_index('ix_departments_owner_admin_id', 'departments', ['owner_admin_id'])

    op.create_table(
        'employees',
        *_base_columns(),
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False, unique=True),
        sa.Column('phone', sa.String(20)),
        sa.Column('hire_date', sa.Date(), nullable=False),
        sa.Column('position', sa.String(100)),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id')),
        sa.Column('employment_status', employment_status, nullable=False),
        sa.Column('owner_admin_id', sa.String(100)),
    )
    op.create_index('ix_employees_owner_admin_id', 'employees', ['owner_admin_id'])

    op.create_table(
        'leave_requests',
        *_base_columns(),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('leave_type', leave_type, nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', leave_status, nullable=False),
        sa.Column('reason', sa.String(500)),
        sa.Column('owner_admin_id', sa.String(100)),
    )
    op.create_index('ix_leave_requests_employee_id', 'leave_requests', ['employee_id'])
    op.create_index('ix_leave_requests_owner_admin_id', 'leave_requests', ['owner_admin_id'])

    op.create_table(
        'candidates',
        *_base_columns(),
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False, unique=True),
        sa.Column('phone', sa.String(20)),
        sa.Column('linkedin_profile', sa.String(200)),
        sa.Column('years_of_experience', sa.Integer()),
        sa.Column('skills', sa.String(1000)),
        sa.Column('owner_admin_id', sa.String(100)),
    )
    op.create_index('ix_candidates_owner_admin_id', 'candidates', ['owner_admin_id'])

    op.create_table(
        'job_applications',
        *_base_columns(),
        sa.Column('candidate_id', sa.Integer(), sa.ForeignKey('candidates.id'), nullable=False),
        sa.Column('job_title', sa.String(100), nullable=False),
        sa.Column('status', job_application_status, nullable=False),
        sa.Column('cover_letter', sa.String(500)),
        sa.Column('expected_salary', sa.Numeric(18, 2)),
        sa.Column('owner_admin_id', sa.String(100)),
    )
    op.create_index('ix_job_applications_candidate_id', 'job_applications', ['candidate_id'])
    op.create_index('ix_job_applications_owner_admin_id', 'job_applications', ['owner_admin_id'])

    op.create_table(
        'access_requests',
        *_base_columns(),
        sa.Column('resource_type', resource_type, nullable=False),
        sa.Column('resource_id', sa.Integer(), nullable=False),
        sa.Column('owner_admin_id', sa.String(100), nullable=False),
        sa.Column('requester_admin_id', sa.String(100), nullable=False),
        sa.Column('status', access_request_status, nullable=False),
        sa.Column('requested_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('decided_at', sa.DateTime(timezone=True)),
        sa.Column('allowed_until', sa.DateTime(timezone=True)),
        sa.Column('note', sa.String(500)),
    )
    op.create_index('ix_access_requests_owner_admin_id', 'access_requests', ['owner_admin_id'])
    op.create_index('ix_access_requests_requester_admin_id', 'access_requests', ['requester_admin_id'])
    op.create_index('ix_access_requests_resource', 'access_requests', ['resource_type', 'resource_id'])
    op.create_index(
        'uq_access_requests_one_pending',
        'access_requests',
        ['requester_admin_id', 'resource_type', 'resource_id'],
        unique=True,
        postgresql_where=sa.text("status = 'PENDING'"),
        sqlite_where=sa.text("status = 'PENDING'"),
    )

    op.create_table(
        'admin_delegations',
        *_base_columns(),
        sa.Column('from_admin_id', sa.String(100), nullable=False),
        sa.Column('to_admin_id', sa.String(100), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', delegation_status, nullable=False),
        sa.Column('reason', sa.String(500)),
        sa.Column('revoked_at', sa.DateTime(timezone=True)),
    )
    op.create_index('ix_admin_delegations_from_admin_id', 'admin_delegations', ['from_admin_id'])
    op.create_index('ix_admin_delegations_to_admin_id', 'admin_delegations', ['to_admin_id'])


def downgrade():
    op.drop_table('admin_delegations')
    op.drop_table('access_requests')
    op.drop_table('job_applications')
    op.drop_table('candidates')
    op.drop_table('leave_requests')
    op.drop_table('employees')
    op.drop_table('departments')

    bind = op.get_bind()
    for enum_type in (resource_type, access_request_status, delegation_status, employment_status,
                      job_application_status, leave_status, leave_type):
        enum_type.drop(bind, checkfirst=True)
