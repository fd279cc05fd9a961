"""
Seed demo data: an admin user, GST registrations, a property statement and
a property tax balance. Records that already exist are left untouched.
Run with: python -m app.scripts.seed_data
"""
import asyncio
import json
from app.config import Settings
from app.core.security import get_password_hash
from app.database import build_engine, build_session_factory, init_db
from app.models.gst_registration import GSTRegistration
from app.models.property import PropertyConsolidatedStatement, PropertyTaxBalance
from app.models.user import User, UserRole
from app.repositories.gst import GSTRegistrationRepository
from app.repositories.property import PropertyStatementRepository, PropertyTaxBalanceRepository
from app.repositories.user import UserRepository

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@iras-gateway.local"
ADMIN_PASSWORD = "admin123"

GST_REGISTRATIONS = [
    {
        "client_id": "C1",
        "registration_id": "R1",
        "gst_registration_number": "M90312345A",
        "name": "ABC TRADING PTE. LTD.",
        "registered_from": "2010-01-01",
        "registered_to": "",
        "status": "Registered",
        "remarks": "",
    },
    {
        "client_id": "C1",
        "registration_id": "200312345A",
        "gst_registration_number": "200312345A",
        "name": "SUNRISE LOGISTICS PTE. LTD.",
        "registered_from": "2003-07-01",
        "registered_to": "2021-12-31",
        "status": "Deregistered",
        "remarks": "Ceased business",
    },
]

STATEMENT_BODY = {
    "statementDate": "2025-01-15",
    "totalAmount": "1,850.00",
    "propertyDetails": [
        {
            "propertyId": "PROP100",
            "address": "10 Anson Road, Singapore 079903",
            "propertyType": "Commercial",
            "taxAmount": "1,850.00",
            "dueDate": "2025-01-31",
            "status": "Outstanding",
        },
    ],
    "paymentHistory": [],
}


async def seed():
    """Seed demo data"""
    settings = Settings()
    engine = build_engine(settings)
    await init_db(engine)
    session_factory = build_session_factory(engine)

    print("Seeding demo data...")
    async with session_factory() as db:
        users = UserRepository(db)
        if await users.find_by_username(ADMIN_USERNAME) is None:
            await users.create(User(
                name="Administrator",
                username=ADMIN_USERNAME,
                email=ADMIN_EMAIL,
                password_hash=get_password_hash(ADMIN_PASSWORD),
                role=UserRole.ADMIN,
                is_active=True,
            ))
            print(f"  Created admin user: {ADMIN_USERNAME} / {ADMIN_PASSWORD}")
        else:
            print(f"  Admin user {ADMIN_USERNAME} already exists")

        registrations = GSTRegistrationRepository(db)
        for data in GST_REGISTRATIONS:
            if await registrations.find_by(registration_id=data["registration_id"]) is None:
                await registrations.create(GSTRegistration(**data))
                print(f"  Created GST registration: {data['registration_id']} ({data['name']})")

        statements = PropertyStatementRepository(db)
        if await statements.find_statement("REF100", "PTR100") is None:
            await statements.create(PropertyConsolidatedStatement(
                ref_no="REF100",
                property_tax_ref="PTR100",
                statement_date=STATEMENT_BODY["statementDate"],
                total_amount=STATEMENT_BODY["totalAmount"],
                consolidated_data=json.dumps(STATEMENT_BODY),
            ))
            print("  Created property statement: REF100 / PTR100")

        balances = PropertyTaxBalanceRepository(db)
        if await balances.search("C1", property_tax_ref="PTR100") is None:
            await balances.create(PropertyTaxBalance(
                client_id="C1",
                postal_code="079903",
                blk_house_no="10",
                street_name="Anson Road",
                storey_no="12",
                unit_no="01",
                owner_tax_ref="S1234567D",
                property_tax_ref="PTR100",
                property_desc="10 Anson Road #12-01, Singapore 079903",
                outstanding_balance=1850.0,
                is_giro=True,
            ))
            print("  Created property tax balance: PTR100")

    await engine.dispose()
    print("\n✅ Demo data seeded successfully!")


if __name__ == "__main__":
    asyncio.run(seed())
