"""
OpenID Connect login against the external identity provider.

Endpoints and signing keys come from the provider's discovery document
(`{issuer}/.well-known/openid-configuration`) and its JWKS. The authorization
code is exchanged for tokens, the id_token is verified against those keys,
and the resulting claims are mapped onto the local user.
"""

import logging
import time
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import httpx
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import AuthenticationError
from app.crud import crud_user
from app.models.user import User
from app.schemas.user import UserUpsert

logger = logging.getLogger(__name__)

DEFAULT_ID_TOKEN_ALGORITHMS = ["RS256"]
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")

# Discovery document and JWKS per issuer, refreshed after OIDC_DISCOVERY_CACHE_SECONDS
discovery_cache: Dict[str, Dict[str, Any]] = {}


def _issuer() -> str:
    return settings.OIDC_ISSUER_URL.rstrip("/")


def _cache_fresh(entry: Optional[Dict[str, Any]]) -> bool:
    return bool(entry) and time.time() - entry["fetched_at"] < settings.OIDC_DISCOVERY_CACHE_SECONDS


async def _get_json(url: str) -> Dict[str, Any]:
    async with httpx.AsyncClient(timeout=settings.OIDC_TIMEOUT_SECONDS) as client:
        try:
            response = await client.get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[OIDC] Failed to fetch {url}: {e}")
            raise AuthenticationError(f"Could not reach identity provider: {url}") from e


async def get_provider_metadata() -> Dict[str, Any]:
    """Return the provider's discovery document together with its JWKS."""
    issuer = _issuer()
    cached = discovery_cache.get(issuer)
    if _cache_fresh(cached):
        return cached["metadata"]

    metadata = await _get_json(f"{issuer}/.well-known/openid-configuration")
    for key in ("authorization_endpoint", "token_endpoint", "jwks_uri"):
        if not metadata.get(key):
            raise AuthenticationError(f"Discovery document has no {key}")
    metadata["jwks"] = await _get_json(metadata["jwks_uri"])
    logger.info(f"[OIDC] Loaded discovery document for {issuer} ({len(metadata['jwks'].get('keys', []))} keys)")

    discovery_cache[issuer] = {"metadata": metadata, "fetched_at": time.time()}
    return metadata


def build_authorize_url(metadata: Dict[str, Any], state: str) -> str:
    params = {
        "response_type": "code",
        "client_id": settings.OIDC_CLIENT_ID,
        "redirect_uri": settings.OIDC_REDIRECT_URI,
        "scope": settings.OIDC_SCOPE,
        "state": state,
        "prompt": "login consent",
    }
    return f"{metadata['authorization_endpoint']}?{urlencode(params)}"


async def exchange_code(code: str, metadata: Dict[str, Any]) -> Dict[str, Any]:
    """Trade an authorization code for the provider's token response."""
    async with httpx.AsyncClient(timeout=settings.OIDC_TIMEOUT_SECONDS) as client:
        try:
            response = await client.post(
                metadata["token_endpoint"],
                data={
                    "grant_type": "authorization_code",
                    "code": code,
                    "redirect_uri": settings.OIDC_REDIRECT_URI,
                    "client_id": settings.OIDC_CLIENT_ID,
                    "client_secret": settings.OIDC_CLIENT_SECRET,
                },
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.warning(f"[OIDC] Token exchange failed: {e}")
            raise AuthenticationError("Token exchange failed") from e


def _signing_algorithms(metadata: Dict[str, Any]) -> List[str]:
    advertised = metadata.get("id_token_signing_alg_values_supported") or DEFAULT_ID_TOKEN_ALGORITHMS
    return [alg for alg in advertised if alg not in HMAC_ALGORITHMS and alg != "none"]


def verify_id_token(id_token: str, metadata: Dict[str, Any], access_token: Optional[str] = None) -> Dict[str, Any]:
    """
    Verify the id_token signature, audience and issuer.

    Asymmetric tokens are checked against the provider's JWKS using the
    advertised algorithms. HS256 tokens signed with the client secret are
    only accepted when OIDC_ALLOW_HS256 is enabled.
    """
    try:
        alg = jwt.get_unverified_header(id_token).get("alg")
        if alg in HMAC_ALGORITHMS:
            if not settings.OIDC_ALLOW_HS256 or alg != "HS256":
                raise AuthenticationError(f"id_token algorithm {alg} is not allowed")
            key, algorithms = settings.OIDC_CLIENT_SECRET, ["HS256"]
        else:
            key, algorithms = metadata.get("jwks") or {"keys": []}, _signing_algorithms(metadata)

        return jwt.decode(
            id_token,
            key,
            algorithms=algorithms,
            audience=settings.OIDC_CLIENT_ID,
            issuer=metadata.get("issuer") or settings.OIDC_ISSUER_URL,
            access_token=access_token,
        )
    except JWTError as e:
        logger.warning(f"[OIDC] Rejected id_token: {e}")
        raise AuthenticationError("Invalid id_token") from e


def claims_to_user(claims: Dict[str, Any]) -> UserUpsert:
    return UserUpsert(
        id=str(claims["sub"]),
        email=claims.get("email"),
        first_name=claims.get("first_name") or claims.get("given_name"),
        last_name=claims.get("last_name") or claims.get("family_name"),
        profile_image_url=claims.get("profile_image_url") or claims.get("picture"),
    )


async def authenticate(code: str) -> Dict[str, Any]:
    """Run the code exchange and return the verified id_token claims."""
    metadata = await get_provider_metadata()
    tokens = await exchange_code(code, metadata)
    id_token = tokens.get("id_token")
    if not id_token:
        raise AuthenticationError("Token response carried no id_token")

    claims = verify_id_token(id_token, metadata, tokens.get("access_token"))
    if not claims.get("sub"):
        raise AuthenticationError("id_token carried no subject")
    return claims


def complete_login(db: Session, claims: Dict[str, Any]) -> User:
    user = crud_user.upsert_user(db, claims_to_user(claims))
    logger.info(f"[OIDC] Signed in user {user.id}")
    return user
