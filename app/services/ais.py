from app.schemas.ais import AISOrgData, AISOrgSearchRequest
from app.schemas.common import FieldInfo, IrasResponse, iras_error

MIN_BASIS_YEAR = 1900
MAX_BASIS_YEAR = 2100

# Sandbox organisations that report as participating in AIS
AIS_TEST_ORGANIZATIONS = frozenset({
    "4396029847797760",
    "1234567890123456",
})


def search_organization(request: AISOrgSearchRequest) -> IrasResponse:
    """Validation failures come back as returnCode 40 inside a 200 response"""
    if not request.clientID.strip():
        return iras_error("Invalid client ID", "40001", [
            FieldInfo(field="clientID", message="Client ID is required and cannot be empty"),
        ])
    if not request.organizationID.strip():
        return iras_error("Invalid organization ID", "40002", [
            FieldInfo(field="organizationID", message="Organization ID is required and cannot be empty"),
        ])
    if request.basisYear < MIN_BASIS_YEAR or request.basisYear > MAX_BASIS_YEAR:
        return iras_error("Invalid basis year", "40003", [
            FieldInfo(field="basisYear", message="Basis year must be between 1900 and 2100"),
        ])

    in_ais = request.organizationID.strip() in AIS_TEST_ORGANIZATIONS
    return IrasResponse(returnCode=10, data=AISOrgData(organizationInAIS="Y" if in_ais else "N"))
