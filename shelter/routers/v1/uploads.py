"""
Роутер загрузки изображений.

Routes:
    POST /upload-image - Загрузить изображение и получить его URL (Bearer)
"""

from fastapi import File, UploadFile, status

from shelter.core.dependencies import UploadServiceDep
from shelter.core.security.auth import CurrentUserDep
from shelter.routers.base import ProtectedRouter
from shelter.schemas.v1.uploads import (UploadImageDataSchema,
                                        UploadImageResponseSchema)


class UploadRouter(ProtectedRouter):
    """
    Загрузка изображений для редактора контента.
    """

    def __init__(self):
        super().__init__(tags=["Uploads"])

    def configure(self):

        @self.router.post(
            path="/upload-image",
            response_model=UploadImageResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Загрузить изображение

            Файл сохраняется в папку uploads хранилища.

            ### Требуется Bearer токен

            ### Form data:
            * **image**: JPEG, PNG, GIF или WebP

            ### Returns:
            * **image_url**: Публичный URL изображения

            ### Errors:
            * **400**: Недопустимый тип или размер файла
            * **503**: Хранилище не инициализировано
            """,
            responses={
                201: {"description": "Изображение загружено"},
                400: {"description": "Ошибка валидации файла"},
                401: {"description": "Не авторизован"},
                503: {"description": "Хранилище недоступно"},
            },
        )
        async def upload_image(
            image: UploadFile = File(..., description="Изображение"),
            current_user: CurrentUserDep = None,
            upload_service: UploadServiceDep = None,
        ) -> UploadImageResponseSchema:
            url = await upload_service.upload_image(image)
            return UploadImageResponseSchema(
                message="Изображение загружено",
                data=UploadImageDataSchema(image_url=url),
            )
