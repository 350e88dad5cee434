import mimetypes
import os
import uuid

import boto3
from botocore.config import Config as BotoConfig
from flask import current_app

from skillbridge.errors import ValidationError


def allowed_file(filename):
    """Check if the file has an allowed extension."""
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in current_app.config['ALLOWED_EXTENSIONS']


def generate_name(filename):
    """Unique storage key keeping the original extension."""
    extension = filename.rsplit('.', 1)[1].lower()
    return f"{uuid.uuid4().hex}.{extension}"


def s3_client():
    return boto3.client(
        's3',
        aws_access_key_id=current_app.config['AWS_ACCESS_KEY'],
        aws_secret_access_key=current_app.config['AWS_SECRET_KEY'],
        region_name=current_app.config['AWS_REGION'],
        config=BotoConfig(connect_timeout=5, read_timeout=10, retries={'max_attempts': 3})
    )


def save_document(file):
    """Store an uploaded document and return the generated name.

    Only the name is persisted by callers; the content lives in the upload
    folder or in the S3 bucket depending on STORAGE_BACKEND.
    """
    if not file or not file.filename:
        return None
    if not allowed_file(file.filename):
        raise ValidationError('Document type not allowed')

    name = generate_name(file.filename)

    try:
        if current_app.config['STORAGE_BACKEND'] == 's3':
            content_type, _ = mimetypes.guess_type(name)
            s3_client().put_object(
                Bucket=current_app.config['AWS_BUCKET_NAME'],
                Key=f"documents/{name}",
                Body=file.stream,
                ContentType=content_type or "application/octet-stream",
            )
        else:
            folder = current_app.config['UPLOAD_FOLDER']
            os.makedirs(folder, exist_ok=True)
            file.save(os.path.join(folder, name))
    except Exception as e:
        print(f"[ERROR] Failed to save document: {e}")
        raise

    print(f"[DEBUG] Saved document as {name}")
    return name


def delete_document(name):
    """Remove a document whose registration did not go through."""
    if not name:
        return

    try:
        if current_app.config['STORAGE_BACKEND'] == 's3':
            s3_client().delete_object(Bucket=current_app.config['AWS_BUCKET_NAME'], Key=f"documents/{name}")
        else:
            path = os.path.join(current_app.config['UPLOAD_FOLDER'], name)
            if os.path.exists(path):
                os.unlink(path)
    except Exception as e:
        print(f"[ERROR] Failed to delete orphan document {name}: {e}")
