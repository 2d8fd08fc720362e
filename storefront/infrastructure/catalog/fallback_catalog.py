from __future__ import annotations

from decimal import Decimal

from storefront.domain.entities.service import Service


GOVERNMENT = "Government & E-Citizen Services"
IT = "IT Services"
TAX = "Tax Services"


def _service(id: str, name: str, price: int, category: str, description: str, days: int) -> Service:
    return Service(
        id=id,
        name=name,
        price=Decimal(price),
        category=category,
        description=description,
        estimated_days=days,
    )


FALLBACK_SERVICES: tuple[Service, ...] = (
    _service("1", "Good Conduct Certificate", 1500, GOVERNMENT, "Certificate of good conduct application", 7),
    _service("2", "NTSA Services", 2000, GOVERNMENT, "DL renewal, TIMS account registration, vehicle search", 3),
    _service("3", "Passport Application", 2500, GOVERNMENT, "Passport application assistance", 14),
    _service("4", "NSSF & NHIF Registration", 1000, GOVERNMENT, "Registration and contributions", 5),
    _service("5", "CRB Clearance Certificate", 800, GOVERNMENT, "Credit reference bureau clearance", 3),
    _service("6", "Web Development", 15000, IT, "Custom website development", 21),
    _service("7", "Computer Repair", 3000, IT, "Hardware and software repairs", 2),
    _service("8", "Windows Activation/Installation", 1500, IT, "OS installation and activation", 1),
    _service("9", "Microsoft Office Installation", 2000, IT, "MS Office suite installation", 1),
    _service("10", "Antivirus Installation", 1000, IT, "Antivirus software installation", 1),
    _service("11", "Hardware Sales", 5000, IT, "Computer hardware sales", 3),
    _service("12", "Laptop Ordering", 25000, IT, "Order and sell laptops", 7),
    _service("13", "VAT Returns Filing", 3000, TAX, "Monthly VAT returns preparation", 2),
    _service("14", "Tax Compliance Certificate", 2500, TAX, "Tax compliance certificate application", 5),
    _service("15", "e-TIMS Services", 4000, TAX, "Registration, installation, updates, training, receipts", 3),
    _service("16", "P9 Forms", 1500, TAX, "P9 form preparation", 2),
    _service("17", "Income Tax Returns", 3500, TAX, "Individual and company income tax returns", 5),
    _service("18", "PIN Registration", 500, TAX, "Individual and non-individual PIN registration", 1),
)
