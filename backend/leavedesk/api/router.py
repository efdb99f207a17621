from fastapi import APIRouter

from leavedesk.api.employees import employees_router
from leavedesk.api.health import health_router
from leavedesk.api.leave_requests import leave_requests_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(leave_requests_router)
api_router.include_router(employees_router)
