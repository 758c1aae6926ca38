"""Ошибки менеджеров меню и заказов."""


class ResourceError(Exception):
    """Базовая ошибка менеджеров ресурсов."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ResourceError):
    """Нет обязательного поля или значение недопустимо."""

    status_code = 400


class NotFoundError(ResourceError):
    """По id нет записи."""

    status_code = 404

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.resource_id = resource_id


class StoreError(ResourceError):
    """Хранилище недоступно или отклонило операцию."""

    status_code = 500
