import base64
import mimetypes

from werkzeug.utils import secure_filename

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def read_as_data_uri(file):
    """
    Reads an uploaded image into a `data:` URI.

    Nothing is written to disk; the URI is stored inline on the section.
    """
    filename = secure_filename(file.filename or "")
    if not allowed_file(filename):
        raise ValueError("File type not allowed")

    mimetype = file.mimetype
    if not mimetype or mimetype == "application/octet-stream":
        mimetype = mimetypes.guess_type(filename)[0] or "application/octet-stream"

    payload = base64.b64encode(file.read()).decode("ascii")
    return f"data:{mimetype};base64,{payload}"
