"""
Cows Shelter Backend: API контента сайта приюта (новости, экскурсии,
галерея, партнёры, отзывы, контакты, PDF документы) с хранением файлов
в AWS S3 или MinIO.
"""
