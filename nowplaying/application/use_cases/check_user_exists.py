"""Check User Exists Use Case"""

from starlette.concurrency import run_in_threadpool

from ...domain.repositories.user_repository import IUserRepository


class CheckUserExistsUseCase:
    """Passthrough existence query; no caching, no side effects"""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, username: str) -> bool:
        # The repository does blocking I/O
        return await run_in_threadpool(self.user_repository.exists_by_username, username)
