"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .pages import router as pages_router
from .reports import router as reports_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    pages_router,
    auth_router,
    reports_router,
)

__all__ = ["ALL_ROUTERS"]
