from pydantic import BaseModel
from typing import Any, List, Optional, Union


# IRAS envelope
class FieldInfo(BaseModel):
    field: str
    message: str
    recordID: Optional[str] = None


class FieldInfoGroup(BaseModel):
    """Rental submission wraps its field errors one level deeper"""
    fieldInfo: List[FieldInfo]


class IrasInfo(BaseModel):
    message: str
    messageCode: Union[int, str]
    fieldInfoList: Optional[Union[List[FieldInfo], FieldInfoGroup]] = None


class IrasResponse(BaseModel):
    returnCode: int
    data: Optional[Any] = None
    info: Optional[IrasInfo] = None


def iras_error(
    message: str,
    message_code: Union[int, str],
    fields: Optional[List[FieldInfo]] = None,
    return_code: int = 40,
    nested: bool = False,
) -> IrasResponse:
    """Build a failure envelope; nested=True uses the {fieldInfo: [...]} form"""
    field_info_list = None
    if fields:
        field_info_list = FieldInfoGroup(fieldInfo=fields) if nested else fields
    return IrasResponse(
        returnCode=return_code,
        info=IrasInfo(message=message, messageCode=message_code, fieldInfoList=field_info_list),
    )


# Internal envelope
class PaginationResponse(BaseModel):
    data: List[Any]
    total: int
    page: int
    limit: int
    total_pages: int
