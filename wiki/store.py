from typing import Optional, Tuple

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from core.db import open_session
from core.exceptions import PageNotFound, PersistenceError, handle_exception
from core.logger import logging
from model.page import Page
from wiki.naming import canonical


class PageStore:
    """
    Persistence for wiki pages.

    Holds an engine, never a connection: every operation opens its own
    session and closes it before returning.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def load_page(self, name: str) -> Tuple[bool, Optional[Page]]:
        """
        Find a page by name, ignoring case
        Args:
            name: Page name as typed or taken from the url
        Returns:
            (found, page); the lowest id wins when several pages share a name
        """
        with open_session(self.engine) as session:
            page = self._find_by_name(session, name)

        if page is None:
            return False, None
        return True, page

    def save_page(self, page: Page) -> Tuple[bool, Page, Optional[Exception]]:
        """
        Insert a page without id, update the stored page with the same id otherwise
        Args:
            page: Page to persist
        Returns:
            (ok, page, error); page carries the store-assigned id after an insert
        """
        try:
            with open_session(self.engine) as session:
                if not page.id:
                    saved = self._insert(session, page)
                else:
                    saved = self._update(session, page)
        except PageNotFound as e:
            handle_exception(e, "Failed to save page", source="store")
            return False, page, e
        except SQLAlchemyError as e:
            handle_exception(e, "Failed to save page", source="store")
            return False, page, self._persistence_error(page, e)
        except Exception as e:
            # Driver errors the engine does not wrap, e.g. OverflowError on huge ids
            handle_exception(e, "Failed to save page", source="store")
            return False, page, self._persistence_error(page, e)

        return True, saved, None

    @staticmethod
    def _persistence_error(page: Page, e: Exception) -> PersistenceError:
        error = PersistenceError(f"Failed to save page {page.name!r}: {e}")
        error.__cause__ = e
        return error

    @staticmethod
    def _find_by_name(session: Session, name: str) -> Optional[Page]:
        key = canonical(name)
        rows = session.exec(select(Page.id, Page.name).order_by(Page.id))
        for page_id, page_name in rows:
            if canonical(page_name) == key:
                return session.get(Page, page_id)
        return None

    @staticmethod
    def _insert(session: Session, page: Page) -> Page:
        logging.info(f"Insert page {page.name!r}")
        # 0 means unsaved, let the store assign the id
        page.id = None
        session.add(page)
        session.commit()
        session.refresh(page)
        return page

    @staticmethod
    def _update(session: Session, page: Page) -> Page:
        logging.info(f"Update page {page.id} {page.name!r}")
        stored = session.get(Page, page.id)
        if stored is None:
            raise PageNotFound(f"No page with id {page.id}")

        stored.name = page.name
        stored.content = page.content
        stored.last_modified = page.last_modified
        session.add(stored)
        session.commit()
        session.refresh(stored)
        return stored
