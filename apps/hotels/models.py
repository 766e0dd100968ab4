"""Hotel catalog models."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Hotel(models.Model):
    """A bookable hotel."""

    name = models.CharField(max_length=255, unique=True)
    address = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        default=Decimal("3.0"),
        validators=[MinValueValidator(Decimal("1.0")), MaxValueValidator(Decimal("5.0"))],
    )
    price_range = models.CharField(max_length=10, blank=True, help_text=_("For example $, $$ or $$$."))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Hotel")
        verbose_name_plural = _("Hotels")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class RoomType(models.Model):
    """A category of rooms within a hotel (Standard, Deluxe, Suite...)."""

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="room_types")
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    price_per_night = models.DecimalField(max_digits=10, decimal_places=2)
    capacity = models.PositiveSmallIntegerField(default=2)
    amenities = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room type")
        verbose_name_plural = _("Room types")
        ordering = ["hotel_id", "price_per_night"]
        constraints = [
            models.UniqueConstraint(fields=["hotel", "name"], name="room_type_unique_name_per_hotel"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.hotel_id})"


class Room(models.Model):
    """A physical room. Availability for dates comes from bookings."""

    class Status(models.TextChoices):
        AVAILABLE = "available", _("Available")
        OCCUPIED = "occupied", _("Occupied")
        MAINTENANCE = "maintenance", _("Maintenance")
        RESERVED = "reserved", _("Reserved")

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    room_type = models.ForeignKey(RoomType, on_delete=models.PROTECT, related_name="rooms")
    room_number = models.CharField(max_length=20)
    floor = models.SmallIntegerField(default=1)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.AVAILABLE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["hotel_id", "room_number"]
        constraints = [
            models.UniqueConstraint(fields=["hotel", "room_number"], name="room_unique_number_per_hotel"),
        ]

    def __str__(self) -> str:
        return f"Room {self.room_number} ({self.hotel_id})"
