import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}

UPLOADS_URL_PREFIX = "/uploads"


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def upload_folder():
    folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.instance_path, folder)
    return folder


def save_file(file):
    if not file.filename or not allowed_file(file.filename):
        raise ValueError(f"File type not allowed: {file.filename}")

    filename = secure_filename(file.filename)
    ext = filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    folder = upload_folder()
    os.makedirs(folder, exist_ok=True)
    file.save(os.path.join(folder, unique_filename))

    # Server-relative URL; clients prefix their backend base URL
    return f"{UPLOADS_URL_PREFIX}/{unique_filename}"


def save_files(files):
    """Saves every file or none of them."""
    for file in files:
        if not file.filename or not allowed_file(file.filename):
            raise ValueError(f"File type not allowed: {file.filename}")

    urls = []
    try:
        for file in files:
            urls.append(save_file(file))
    except Exception:
        for url in urls:
            delete_file(url)
        raise
    return urls


def delete_file(file_url):
    """
    Deletes a stored upload given its URL.
    """
    if not file_url or not file_url.startswith(UPLOADS_URL_PREFIX + "/"):
        return False

    file_path = os.path.join(upload_folder(), os.path.basename(file_url))

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error(f"Failed to delete file {file_path}: {e}")
            return False
    return False
