"""
Роутеры PDF документов.

Создание и обновление принимают multipart/form-data (title + document),
поэтому маршруты описаны отдельно от обобщённых роутеров контента.

Routes:
    GET    /pdf                - Список документов
    GET    /pdf/pagination     - Страница документов
    GET    /pdf/{item_id}      - Документ по ID
    POST   /pdf                - Загрузить документ (Bearer)
    PUT    /pdf/{item_id}      - Обновить документ (Bearer)
    PATCH  /pdf/{item_id}      - Обновить документ (Bearer)
    DELETE /pdf/{item_id}      - Удалить документ (Bearer)
"""

from typing import Optional

from fastapi import File, Form, UploadFile, status

from shelter.core.dependencies import PdfServiceDep
from shelter.core.exceptions import ContentValidationError
from shelter.core.security.auth import CurrentUserDep
from shelter.routers.base import ProtectedRouter
from shelter.routers.v1.content import ContentPublicRouter
from shelter.schemas.base import DeleteResponseSchema
from shelter.schemas.v1.pdfs import (PdfListResponseSchema,
                                     PdfPaginatedResponseSchema,
                                     PdfResponseSchema, PdfSchema)


class PdfPublicRouter(ContentPublicRouter):
    """Публичное чтение PDF документов."""

    resource_title = "PDF документы"
    service_dep = PdfServiceDep
    item_schema = PdfSchema
    response_schema = PdfResponseSchema
    list_response_schema = PdfListResponseSchema
    paginated_response_schema = PdfPaginatedResponseSchema

    def __init__(self):
        super().__init__(prefix="pdf", tags=["PDF"])


class PdfProtectedRouter(ProtectedRouter):
    """
    Загрузка, замена и удаление PDF документов.

    Файл проверяется по MIME типу (application/pdf) и размеру
    (DOCUMENT_MAX_FILE_SIZE) до загрузки в хранилище.
    """

    def __init__(self):
        super().__init__(prefix="pdf", tags=["PDF"])

    def configure(self):

        @self.router.post(
            path="",
            response_model=PdfResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Загрузить PDF документ

            ### Требуется Bearer токен

            ### Form data:
            * **title**: Название документа
            * **document**: PDF файл

            ### Errors:
            * **400**: Нет названия/файла, файл не PDF или слишком большой
            * **500**: Ошибка хранилища или базы данных
            """,
            responses={
                201: {"description": "Документ загружен"},
                400: {"description": "Ошибка валидации"},
                401: {"description": "Не авторизован"},
            },
        )
        async def create_pdf(
            title: str = Form(..., description="Название документа"),
            document: UploadFile = File(..., description="PDF файл"),
            current_user: CurrentUserDep = None,
            service: PdfServiceDep = None,
        ) -> PdfResponseSchema:
            title = title.strip()
            if not title:
                raise ContentValidationError("Поле 'title' обязательно")
            item = await service.create_item({"title": title, "document": document})
            return PdfResponseSchema(
                message="Документ загружен", data=PdfSchema.model_validate(item)
            )

        async def update_pdf(
            item_id: int,
            title: Optional[str] = Form(None, description="Новое название"),
            document: Optional[UploadFile] = File(None, description="Новый PDF файл"),
            current_user: CurrentUserDep = None,
            service: PdfServiceDep = None,
        ) -> PdfResponseSchema:
            changes = {}
            if title is not None:
                title = title.strip()
                if not title:
                    raise ContentValidationError("Поле 'title' не может быть пустым")
                changes["title"] = title
            if document is not None and document.filename:
                changes["document"] = document

            item = await service.update_item(item_id, changes)
            return PdfResponseSchema(
                message="Документ обновлен", data=PdfSchema.model_validate(item)
            )

        for method in ("put", "patch"):
            getattr(self.router, method)(
                path="/{item_id}",
                response_model=PdfResponseSchema,
                status_code=status.HTTP_200_OK,
                description="""
                ## Обновить PDF документ

                Оба поля необязательны. Новый файл заменяет старый, старый
                удаляется из хранилища после сохранения.

                ### Требуется Bearer токен
                """,
                responses={
                    200: {"description": "Документ обновлен"},
                    400: {"description": "Ошибка валидации"},
                    404: {"description": "Документ не найден"},
                },
                name=f"{method}_pdf",
            )(update_pdf)

        @self.router.delete(
            path="/{item_id}",
            response_model=DeleteResponseSchema,
            status_code=status.HTTP_200_OK,
            description="""
            ## Удалить PDF документ

            ### Требуется Bearer токен
            """,
            responses={
                200: {"description": "Документ удален"},
                404: {"description": "Документ не найден"},
            },
        )
        async def delete_pdf(
            item_id: int,
            current_user: CurrentUserDep = None,
            service: PdfServiceDep = None,
        ) -> DeleteResponseSchema:
            await service.delete_item(item_id)
            return DeleteResponseSchema(message="Документ удален")
