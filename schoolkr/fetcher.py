from abc import ABC, abstractmethod
from logging import getLogger
from typing import Any

import aiohttp
from bs4 import BeautifulSoup

from .const import REQUEST_HEADERS, REQUEST_TIMEOUT


log = getLogger(__name__)

class Fetcher(ABC):
    """Downloads a portal page and hands the parsed tree to _parse.

    Subclasses own the page layout, this class only does the request.
    School calls getData(url, default) and returns its result untouched.
    """

    def __init__(self, asyncExecutor=None, session:aiohttp.ClientSession=None, headers:dict=None):
        self.asyncExecutor = asyncExecutor
        self.session = session
        self.headers = {**REQUEST_HEADERS, **(headers or {})}

    @abstractmethod
    def _parse(self, soup:BeautifulSoup) -> Any:
        return

    async def _getPage(self, aiohttp_session, url:str) -> str:
        try:
            async with aiohttp_session.get(url, headers=self.headers, raise_for_status=True) as response:
                log.info(f"Fetching {url}")
                return await response.text()
        except Exception:
            log.exception(f"Failed to retrieve {url}")
            raise

    async def makeSoup(self, html:str) -> BeautifulSoup:

        def soup_helper(html):
            return BeautifulSoup(html, "html.parser")

        if self.asyncExecutor is None:
            return soup_helper(html)
        return await self.asyncExecutor(soup_helper, html)

    async def getData(self, url:str, default:Any="") -> Any:

        if self.session is not None:
            html = await self._getPage(self.session, url)
        else:
            timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                html = await self._getPage(session, url)

        soup = await self.makeSoup(html)
        data = self._parse(soup)

        if not data:
            log.info(f"No data found on {url}, returning default")
            return default
        return data
