#!/usr/bin/env python3
"""
Seed script to create demo reservations
"""

import asyncio
from datetime import date, timedelta


DEMO_RESERVATIONS = [
    {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "phone": "1234567890",
        "guests": 4,
        "time": "19:00",
        "occasion": "birthday",
        "notes": "Celebrating my birthday with family",
    },
    {
        "name": "Ana Lima",
        "email": "ana.lima@example.com",
        "phone": "+5511987654321",
        "guests": 2,
        "time": "20:30",
        "occasion": "anniversary",
        "status": "confirmed",
    },
    {
        "name": "Kenji Sato",
        "email": "kenji@example.com",
        "phone": "5550001111",
        "guests": 8,
        "time": "12:30",
        "occasion": "business",
        "notes": "Needs a quiet corner",
    },
]


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import func, select

    from brewbliss.config import get_settings
    from brewbliss.database import Database
    from brewbliss.errors import SlotUnavailableError
    from brewbliss.models.reservation import Reservation
    from brewbliss.services.reservations import ReservationService

    database = Database(get_settings().database_url)
    await database.create_all()

    try:
        async with database.session() as db:
            result = await db.execute(select(func.count(Reservation.id)))
            if result.scalar():
                print("Reservations already exist. Skipping...")
                return

            service = ReservationService(db)
            day = date.today() + timedelta(days=7)

            print("Creating demo reservations...")
            for offset, fields in enumerate(DEMO_RESERVATIONS):
                payload = dict(fields, date=(day + timedelta(days=offset)).isoformat())
                try:
                    reservation = await service.create(payload)
                except SlotUnavailableError:
                    print(f"Slot taken, skipped: {payload['date']} {payload['time']}")
                    continue
                print(f"Created reservation: {reservation.name} on {reservation.date} at {reservation.time} (ID: {reservation.id})")
    finally:
        await database.dispose()

    print("""
Demo data created successfully!

Try:
  GET /api/reservations
  GET /api/reservations/phone/1234567890
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
