"""
Servicio de almacenamiento de logos e imágenes de galería en Amazon S3.

Los archivos se suben con una clave única (`<uuid4>-<nombre>`), lectura
pública y disposición `inline`; el servicio devuelve la URL pública que se
guarda tal cual en el club.
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Error al interactuar con el almacenamiento de objetos."""
    pass


@dataclass
class FileUpload:
    """Archivo ya leído por la capa GraphQL, listo para subir."""
    filename: str
    content: bytes
    content_type: Optional[str] = None


class S3UploadService:
    """
    Cliente mínimo de S3 para subidas, borrados y URLs firmadas.
    """

    def __init__(self, client=None):
        settings = get_settings()
        self.bucket = settings.AWS_BUCKET_NAME
        self.region = settings.AWS_REGION
        self.max_upload_size = settings.MAX_UPLOAD_SIZE
        self._client = client
        self._credentials = {
            "aws_access_key_id": settings.AWS_ACCESS_KEY_ID,
            "aws_secret_access_key": settings.AWS_SECRET_ACCESS_KEY,
        }

    @property
    def client(self):
        # Cliente perezoso: no se crea hasta la primera subida
        if self._client is None:
            self._client = boto3.client('s3', region_name=self.region, **self._credentials)
            logger.info(f"Cliente S3 inicializado para la región {self.region}")
        return self._client

    def _public_url(self, key: str) -> str:
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def upload_file(self, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
        """
        Subir un archivo y devolver su URL pública.

        Args:
            filename: Nombre original del archivo
            content: Contenido binario
            content_type: Tipo MIME (opcional)

        Returns:
            URL pública del objeto subido

        Raises:
            StorageError: Si falta configuración, el archivo es demasiado grande o S3 falla
        """
        if not self.bucket:
            raise StorageError("AWS_BUCKET_NAME no está configurado")
        if len(content) > self.max_upload_size:
            raise StorageError(
                f"El archivo {filename} supera el tamaño máximo permitido ({self.max_upload_size} bytes)"
            )

        key = f"{uuid.uuid4()}-{filename}"
        params = {
            'Bucket': self.bucket,
            'Key': key,
            'Body': content,
            'ACL': 'public-read',
            'ContentDisposition': 'inline',
        }
        if content_type:
            params['ContentType'] = content_type

        try:
            self.client.put_object(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error de boto3 al subir {filename} a S3: {str(e)}", exc_info=True)
            raise StorageError(f"Failed to upload file to S3: {str(e)}") from e

        url = self._public_url(key)
        logger.info(f"Archivo subido a S3 correctamente: {key}")
        return url

    def delete_file(self, key: str) -> bool:
        """Eliminar un objeto. Devuelve False si S3 rechaza la operación."""
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
            logger.info(f"Archivo eliminado de S3: {key}")
            return True
        except ClientError as e:
            logger.error(f"Error al eliminar {key} de S3: {str(e)}")
            return False

    def get_signed_url(self, key: str, expires_in: int = 3600) -> str:
        """
        Generar una URL firmada de lectura.

        Raises:
            StorageError: Si no se puede firmar la URL
        """
        try:
            return self.client.generate_presigned_url(
                'get_object',
                Params={'Bucket': self.bucket, 'Key': key},
                ExpiresIn=expires_in,
            )
        except ClientError as e:
            logger.error(f"Error al generar URL firmada para {key}: {str(e)}")
            raise StorageError(f"Failed to generate signed URL: {str(e)}") from e


s3_upload_service = S3UploadService()
