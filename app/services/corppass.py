"""Simulated CorpPass login URL and token exchange. Nothing is persisted."""
from fastapi import status
from app.core.errors import IrasError
from app.schemas.common import FieldInfo, IrasResponse, iras_error
from app.schemas.corppass import CorpPassAuthData, CorpPassTokenData, CorpPassTokenRequest

CORPPASS_LOGIN_URL = "https://stg-saml.corppass.gov.sg/FIM/sps/CorpIDPFed/saml20/logininitial"

REGISTERED_CALLBACK_URLS = (
    "http://localhost:3000/callback",
    "https://abcpayroll.com/callback",
    "http://po.ec/vefocuf",
    "https://demo.example.com/callback",
)

DEFAULT_SCOPE = "EmpIncomeSub"
DEFAULT_CALLBACK_URL = "https://demo.example.com/callback"
DEFAULT_STATE = "1234"
TOKEN_EXPIRES_IN = 3600


def is_registered_callback(callback_url: str) -> bool:
    return callback_url in REGISTERED_CALLBACK_URLS


def build_auth_url(scope: str = "", callback_url: str = "", state: str = "", tax_agent: bool = False) -> str:
    scope = scope or DEFAULT_SCOPE
    callback_url = callback_url or DEFAULT_CALLBACK_URL
    state = state or DEFAULT_STATE
    if tax_agent:
        scope += ",TaxAgent"

    return (
        f"{CORPPASS_LOGIN_URL}?RequestBinding=HTTPArtifact&ResponseBinding=HTTPArtifact"
        "&PartnerId=https%3A%2F%2Fstg-home.corppass.gov.sg%2Fconsent%2Firas-cp"
        "&Target=https://stg-home.corppass.gov.sg/consent/oauth2/authorize"
        "?realm=/consent/iras-cp&response_type=code&appName=IRASDemo"
        f"&state={state}&client_id=iras&scope={scope}&redirect_uri={callback_url}"
    )


def corppass_auth(scope: str = "", callback_url: str = "", state: str = "", tax_agent: bool = False) -> IrasResponse:
    if callback_url and not is_registered_callback(callback_url):
        raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
            "Arguments Error", "850301",
            [FieldInfo(field="callback_url", message="The callback_url specified is not registered")],
        ))
    return IrasResponse(
        returnCode=10,
        data=CorpPassAuthData(url=build_auth_url(scope, callback_url, state, tax_agent)),
    )


def corppass_token(request: CorpPassTokenRequest) -> IrasResponse:
    if request.id <= 0:
        raise IrasError(status.HTTP_400_BAD_REQUEST, iras_error(
            "Invalid ID", "40005",
            [FieldInfo(field="id", message="ID must be a positive number")],
        ))
    return IrasResponse(
        returnCode=10,
        data=CorpPassTokenData(
            access_token=f"corppass_access_token_{request.id}_demo_12345",
            token_type="Bearer",
            expires_in=TOKEN_EXPIRES_IN,
            refresh_token=f"corppass_refresh_token_{request.id}_demo_67890",
        ),
    )
