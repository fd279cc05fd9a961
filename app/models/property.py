from sqlalchemy import Column, String, Text, Boolean, Numeric
from app.database import Base
from app.models.base import RecordMixin


class PropertyConsolidatedStatement(RecordMixin, Base):
    __tablename__ = "property_consolidated_statements"

    ref_no = Column(String, nullable=False, index=True)
    property_tax_ref = Column(String, nullable=False, index=True)
    statement_date = Column(String)
    total_amount = Column(String)
    consolidated_data = Column(Text)  # JSON encoded statement body


class PropertyTaxBalance(RecordMixin, Base):
    __tablename__ = "property_tax_balances"

    client_id = Column(String, nullable=False, index=True)
    postal_code = Column(String, index=True)
    blk_house_no = Column(String)
    street_name = Column(String)
    storey_no = Column(String)
    unit_no = Column(String)
    owner_tax_ref = Column(String, index=True)
    property_tax_ref = Column(String, index=True)
    property_desc = Column(Text)
    outstanding_balance = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    is_giro = Column(Boolean, nullable=False, default=False)
