# Pydantic schemas
from app.schemas.common import FieldInfo, FieldInfoGroup, IrasInfo, IrasResponse, PaginationResponse
from app.schemas.auth import RegisterRequest, LoginRequest, LoginResponse, ProfileUpdate, UserInfo, UserResponse
from app.schemas.gst import GSTSearchRequest, GSTData
from app.schemas.property import ConsolidatedStatementRequest, TaxBalanceSearchRequest
from app.schemas.rental import RentalSubmissionRequest
from app.schemas.cit import ConvertFormCSRequest
from app.schemas.singpass import SingPassAuthRequest, SingPassTokenRequest

__all__ = [
    "FieldInfo", "FieldInfoGroup", "IrasInfo", "IrasResponse", "PaginationResponse",
    "RegisterRequest", "LoginRequest", "LoginResponse", "ProfileUpdate", "UserInfo", "UserResponse",
    "GSTSearchRequest", "GSTData",
    "ConsolidatedStatementRequest", "TaxBalanceSearchRequest",
    "RentalSubmissionRequest",
    "ConvertFormCSRequest",
    "SingPassAuthRequest", "SingPassTokenRequest",
]
