# placeholder_data.py
"""
Sample records loaded by the seed route.

Invoice ids are derived from the invoice contents so that seeding the same
list twice hits the primary-key conflict instead of duplicating rows.
"""
import uuid

INVOICE_NAMESPACE = uuid.UUID("6f1c3a52-3a8e-4f0e-9d2b-8f0d6c4b7e21")


def invoice_id(customer_id: str, date: str, amount: int, status: str) -> str:
    return str(uuid.uuid5(INVOICE_NAMESPACE, f"{customer_id.lower()}|{date}|{amount}|{status}"))


users = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

customers = [
    {
        "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        "name": "Evil Rabbit",
        "email": "evil@rabbit.com",
        "image_url": "/customers/evil-rabbit.png",
    },
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "76d65c26-f784-44a2-ac19-586678f7c2f2",
        "name": "Michael Novotny",
        "email": "michael@novotny.com",
        "image_url": "/customers/michael-novotny.png",
    },
    {
        "id": "cc27c14a-0acf-4f4a-a6c9-d45682c144b9",
        "name": "Amy Burrell",
        "email": "amy@burrell.com",
        "image_url": "/customers/amy-burrell.png",
    },
    {
        "id": "13d07535-c59e-4157-a011-f8d2ef4e0cbb",
        "name": "Balazs Orban",
        "email": "balazs@orban.com",
        "image_url": "/customers/balazs-orban.png",
    },
]

_invoice_rows = [
    (customers[0]["id"], 15795, "pending", "2022-12-06"),
    (customers[1]["id"], 20348, "pending", "2022-11-14"),
    (customers[4]["id"], 3040, "paid", "2022-10-29"),
    (customers[3]["id"], 44800, "paid", "2023-09-10"),
    (customers[5]["id"], 34577, "pending", "2023-08-05"),
    (customers[2]["id"], 54246, "pending", "2023-07-16"),
    (customers[0]["id"], 666, "pending", "2023-06-27"),
    (customers[3]["id"], 32545, "paid", "2023-06-09"),
    (customers[4]["id"], 1250, "paid", "2023-06-17"),
    (customers[5]["id"], 8546, "paid", "2023-06-07"),
    (customers[1]["id"], 500, "paid", "2023-08-19"),
    (customers[5]["id"], 8945, "paid", "2023-06-03"),
    (customers[2]["id"], 1000, "paid", "2022-06-05"),
]

invoices = [
    {
        "id": invoice_id(customer_id, date, amount, status),
        "customer_id": customer_id,
        "amount": amount,
        "status": status,
        "date": date,
    }
    for customer_id, amount, status, date in _invoice_rows
]

revenue = [
    {"month": "Jan", "revenue": 2000},
    {"month": "Feb", "revenue": 1800},
    {"month": "Mar", "revenue": 2200},
    {"month": "Apr", "revenue": 2500},
    {"month": "May", "revenue": 2300},
    {"month": "Jun", "revenue": 3200},
    {"month": "Jul", "revenue": 3500},
    {"month": "Aug", "revenue": 3700},
    {"month": "Sep", "revenue": 2500},
    {"month": "Oct", "revenue": 2800},
    {"month": "Nov", "revenue": 3000},
    {"month": "Dec", "revenue": 4800},
]
