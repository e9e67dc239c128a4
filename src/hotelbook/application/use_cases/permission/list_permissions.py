"""List permissions use case."""

from hotelbook.application.dto.permission_dto import PermissionListItem, PermissionPage

MAX_PAGE_SIZE = 100


class ListPermissionsUseCase:
    """Page through permissions ordered by name, with role counts."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, page: int = 1, limit: int = 10) -> PermissionPage:
        page = max(page, 1)
        limit = min(max(limit, 1), MAX_PAGE_SIZE)

        async with self._uow_factory() as uow:
            permissions = await uow.permissions.list(offset=(page - 1) * limit, limit=limit)
            total = await uow.permissions.count()
            counts = await uow.role_permissions.count_by_permissions(
                [p.id for p in permissions]
            )

        return PermissionPage(
            items=[
                PermissionListItem(permission=p, role_count=counts.get(p.id, 0))
                for p in permissions
            ],
            page=page,
            limit=limit,
            total=total,
        )
