"""List roles use case."""

from hotelbook.domain.entities import Role


class ListRolesUseCase:
    """List all roles sorted by name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[Role]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        return sorted(roles, key=lambda r: r.name)
