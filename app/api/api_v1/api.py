from fastapi import APIRouter
from app.api.api_v1.endpoints import clients, employees, finance, requests, health

api_router = APIRouter()
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(finance.router, prefix="/finance", tags=["finance"])
api_router.include_router(requests.router, prefix="/requests", tags=["requests"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
