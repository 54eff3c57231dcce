import base64
import binascii
import logging
import sys
from functools import lru_cache

from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel, Field

from benaloh import __version__, config
from benaloh.crypto import (
    CiphertextTooLargeError,
    DecryptionError,
    MessageTooLargeError,
    PrivateKey,
    bytes_to_int,
    generate_key,
    int_to_bytes,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Benaloh Demo API",
    version=__version__,
)


# ── Security: HTTP headers ───────────────────────────────────
@app.middleware("http")
async def security_headers(request: Request, call_next):
    response: Response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Cache-Control"] = "no-store"
    return response


@lru_cache(maxsize=1)
def get_demo_key() -> PrivateKey:
    """Generate the demo keypair on first use and keep it for the process lifetime."""
    logger.info("generating demo key %s (%d bits)", config.KEY_ID, config.KEY_BITS)
    return generate_key(config.KEY_BITS)


def _b64_to_int(value: str) -> int:
    try:
        return bytes_to_int(base64.b64decode(value, validate=True))
    except (binascii.Error, ValueError) as exc:
        raise HTTPException(status_code=400, detail="invalid base64 ciphertext") from exc


def _int_to_b64(value: int) -> str:
    return base64.b64encode(int_to_bytes(value)).decode()


class EncryptRequest(BaseModel):
    plaintext: int = Field(ge=0, description="Integer in [0, r)")


class DecryptRequest(BaseModel):
    ciphertext_b64: str


class CombineRequest(BaseModel):
    ciphertexts_b64: list[str] = Field(min_length=1)


@app.get("/health")
async def health() -> dict:
    """Liveness probe."""
    return {"status": "ok", "key_id": config.KEY_ID}


@app.get("/crypto/pubkey")
async def get_public_key():
    """Return the demo public key; y, r and n are decimal strings."""
    pub = get_demo_key().public_key
    return {
        "key_id": config.KEY_ID,
        "y": str(pub.y),
        "r": str(pub.r),
        "n": str(pub.n),
    }


@app.post("/crypto/encrypt")
async def encrypt_message(payload: EncryptRequest):
    """Encrypt an integer with the demo public key (server-side fallback)."""
    pub = get_demo_key().public_key
    try:
        ciphertext = pub.raw_encrypt(payload.plaintext)
    except MessageTooLargeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {
        "key_id": config.KEY_ID,
        "plaintext": payload.plaintext,
        "ciphertext_b64": _int_to_b64(ciphertext),
    }


@app.post("/crypto/decrypt")
async def decrypt_message(payload: DecryptRequest):
    priv = get_demo_key()
    c = _b64_to_int(payload.ciphertext_b64)
    try:
        plaintext = priv.raw_decrypt(c)
    except CiphertextTooLargeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DecryptionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"key_id": config.KEY_ID, "plaintext": plaintext}


@app.post("/crypto/combine")
async def combine_ciphertexts(payload: CombineRequest):
    """Homomorphic sum: the result decrypts to the sum of the inputs mod r."""
    pub = get_demo_key().public_key
    ciphertexts = [_b64_to_int(c) for c in payload.ciphertexts_b64]
    try:
        combined = pub.raw_combine(*ciphertexts)
    except CiphertextTooLargeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {
        "key_id": config.KEY_ID,
        "count": len(ciphertexts),
        "ciphertext_b64": _int_to_b64(combined),
    }
