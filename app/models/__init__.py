from app.models.user import User, UserRole
from app.models.catalog import Category, Product
from app.models.gst_registration import GSTRegistration
from app.models.property import PropertyConsolidatedStatement, PropertyTaxBalance
from app.models.rental import RentalSubmission
from app.models.cit import CITConversion
from app.models.singpass import SingPassAuthRecord, SingPassTokenRecord

__all__ = [
    "User",
    "UserRole",
    "Category",
    "Product",
    "GSTRegistration",
    "PropertyConsolidatedStatement",
    "PropertyTaxBalance",
    "RentalSubmission",
    "CITConversion",
    "SingPassAuthRecord",
    "SingPassTokenRecord",
]
