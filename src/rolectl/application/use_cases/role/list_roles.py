"""List roles use case."""

from rolectl.domain.entities import Role


class ListRolesUseCase:
    """Return every role, ordered by machine name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(self) -> list[Role]:
        with self._uow_factory() as uow:
            return uow.roles.get_all()
