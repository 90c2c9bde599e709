"""Creation of Hackatime project links."""
import asyncio
from sqlalchemy.orm import sessionmaker

from shipwrecked.models import HackatimeProjectLink
from shipwrecked.utils.logger import logger


class HackatimeLinkWriter:
    """Creates link rows, each on its own database session.

    Instances are awaitable callables so several links can be written
    concurrently from an async request handler.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _create(self, project_id: str, hackatime_name: str, raw_hours: float) -> HackatimeProjectLink:
        db = self.session_factory()
        try:
            link = HackatimeProjectLink(
                project_id=project_id,
                hackatime_name=hackatime_name,
                raw_hours=raw_hours,
            )
            db.add(link)
            db.commit()
            db.refresh(link)
            db.expunge(link)
            logger.debug(
                f"Linked project {project_id} to Hackatime project '{hackatime_name}' ({raw_hours}h)"
            )
            return link
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def __call__(
        self,
        project_id: str,
        hackatime_name: str,
        raw_hours: float = 0.0,
    ) -> HackatimeProjectLink:
        return await asyncio.to_thread(self._create, project_id, hackatime_name, raw_hours)
