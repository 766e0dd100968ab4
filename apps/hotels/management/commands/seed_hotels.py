"""Create the default hotels, room types and rooms when they are absent."""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.hotels.models import Hotel, Room, RoomType

DEFAULT_HOTELS = [
    {
        "name": "Grand Hotel",
        "address": "123 Main Street, City Center",
        "description": "Luxury hotel in the heart of the city",
        "rating": Decimal("4.5"),
        "price_range": "$$$",
    },
    {
        "name": "Seaside Resort",
        "address": "456 Beach Road, Coastal Area",
        "description": "Beautiful beachfront resort with ocean views",
        "rating": Decimal("4.8"),
        "price_range": "$$$$",
    },
    {
        "name": "Business Inn",
        "address": "789 Business District, Downtown",
        "description": "Modern business hotel with conference facilities",
        "rating": Decimal("4.2"),
        "price_range": "$$",
    },
]

BASE_AMENITIES = ["WiFi", "TV", "Air Conditioning", "Private Bathroom"]

DEFAULT_ROOM_TYPES = [
    {
        "name": "Standard Room",
        "description": "Comfortable standard room with basic amenities",
        "price_per_night": Decimal("100.00"),
        "capacity": 2,
        "amenities": BASE_AMENITIES,
    },
    {
        "name": "Deluxe Room",
        "description": "Spacious deluxe room with premium amenities",
        "price_per_night": Decimal("150.00"),
        "capacity": 2,
        "amenities": BASE_AMENITIES + ["Mini Bar", "Room Service"],
    },
    {
        "name": "Suite",
        "description": "Luxurious suite with separate living area",
        "price_per_night": Decimal("250.00"),
        "capacity": 4,
        "amenities": BASE_AMENITIES + ["Mini Bar", "Room Service", "Balcony", "Jacuzzi"],
    },
]


class Command(BaseCommand):
    help = "Seed the catalog with the default hotels, room types and rooms"

    def add_arguments(self, parser):
        parser.add_argument(
            "--rooms-per-type",
            type=int,
            default=3,
            help="Rooms to create per room type (floor = room type position)",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        rooms_per_type = options["rooms_per_type"]
        created_rooms = 0

        for hotel_data in DEFAULT_HOTELS:
            hotel, created = Hotel.objects.get_or_create(
                name=hotel_data["name"],
                defaults={k: v for k, v in hotel_data.items() if k != "name"},
            )
            if created:
                self.stdout.write(f"Created hotel: {hotel.name}")

            if hotel.room_types.exists():
                continue

            for floor, type_data in enumerate(DEFAULT_ROOM_TYPES, start=1):
                room_type = RoomType.objects.create(hotel=hotel, **type_data)
                for index in range(1, rooms_per_type + 1):
                    Room.objects.create(
                        hotel=hotel,
                        room_type=room_type,
                        room_number=f"{floor}{index:02d}",
                        floor=floor,
                    )
                    created_rooms += 1

        self.stdout.write(self.style.SUCCESS(f"Catalog seeded ({created_rooms} rooms created)"))
