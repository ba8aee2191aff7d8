import io
import secrets
import string
import qrcode
from config import SHARE_BASE_URL, SHARE_HASH_LENGTH

SHARE_HASH_ALPHABET = string.ascii_letters + string.digits

def generate_share_hash(length: int = SHARE_HASH_LENGTH) -> str:
    return ''.join(secrets.choice(SHARE_HASH_ALPHABET) for _ in range(length))

def share_url(share_hash: str) -> str:
    return f"{SHARE_BASE_URL}{share_hash}"

def render_qrcode_png(data: str) -> io.BytesIO:
    img = qrcode.make(data)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf
