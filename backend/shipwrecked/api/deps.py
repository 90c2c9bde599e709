"""Shared FastAPI dependencies for service objects."""
from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from shipwrecked.config import settings
from shipwrecked.database import get_db, get_session_factory
from shipwrecked.services.hackatime import HackatimeClient
from shipwrecked.services.hackatime_links import HackatimeLinkWriter
from shipwrecked.services.progress import HoursToShells, linear_hours_to_shells
from shipwrecked.services.projects import ProjectLifecycleManager


def get_link_writer(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> HackatimeLinkWriter:
    return HackatimeLinkWriter(session_factory)


def get_hackatime_client() -> HackatimeClient:
    return HackatimeClient()


def get_project_manager(
    db: Session = Depends(get_db),
    link_writer: HackatimeLinkWriter = Depends(get_link_writer),
    hackatime_client: HackatimeClient = Depends(get_hackatime_client),
) -> ProjectLifecycleManager:
    return ProjectLifecycleManager(db, link_writer=link_writer, hackatime_client=hackatime_client)


def get_hours_to_shells() -> HoursToShells:
    return linear_hours_to_shells(settings.shells_per_hour)
