"""
Location Data Model for Django
One denormalized table holding every report sent by client machines
"""
from django.db import models


class LocationRecord(models.Model):
    """
    A single reported position.
    Equivalent to the locations table in SQLite.

    ``timestamp`` is the observation time declared by the client (free text,
    possibly malformed) and is only used for date filtering. ``created_at`` is
    assigned on insert and is the ordering key for every "most recent" query.
    """
    id = models.AutoField(primary_key=True)

    # Position
    latitude = models.FloatField()
    longitude = models.FloatField()
    altitude = models.FloatField(default=0.0)

    # Observation time as sent by the client
    timestamp = models.TextField(help_text="Client-declared observation time")

    # Reporting device
    machine_name = models.CharField(max_length=255, help_text="Reporting machine")
    user_name = models.CharField(max_length=255, null=True, blank=True)
    location_source = models.CharField(max_length=100, null=True, blank=True, default='Unknown')
    public_ip = models.CharField(max_length=64, null=True, blank=True)
    city = models.CharField(max_length=255, null=True, blank=True)
    country = models.CharField(max_length=255, null=True, blank=True)

    # Fix quality
    accuracy = models.FloatField(null=True, blank=True, help_text="Accuracy in meters")
    speed = models.FloatField(null=True, blank=True)

    # Server-side metadata
    received_at = models.DateTimeField(help_text="When the server received the report")
    server_ip = models.CharField(max_length=64, null=True, blank=True, help_text="Caller address")
    user_agent = models.TextField(null=True, blank=True, default='Unknown')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'locations'
        indexes = [
            models.Index(fields=['machine_name'], name='idx_machine_name'),
            models.Index(fields=['timestamp'], name='idx_timestamp'),
            models.Index(fields=['created_at'], name='idx_created_at'),
        ]
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Location {self.machine_name} @ {self.created_at} ({self.latitude}, {self.longitude})"
