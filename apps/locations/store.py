"""
Location storage
All reads and writes against the locations table go through LocationStore
"""
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta
from datetime import timezone as dt_timezone

from django.apps import apps
from django.db import connections, transaction
from django.db.models import Avg, CharField, Count, F, Func, Max, Min
from django.db.models.functions import TruncDate
from django.utils import timezone

from .functions import round_half_up
from .models import LocationRecord

logger = logging.getLogger(__name__)

RECENT_ORDER = ('-created_at', '-id')


@dataclass(frozen=True)
class StoreConfig:
    alias: str = 'default'


class LocationStore:
    """
    Shared storage handle, created once when the app loads.

    Wraps one Django connection alias; every request reuses the same
    persistent connection (CONN_MAX_AGE=None) until close() is called.
    """

    def __init__(self, cfg):
        self.cfg = cfg

    @property
    def connection(self):
        return connections[self.cfg.alias]

    @property
    def path(self):
        # settings_dict reflects the test database name while tests run
        return os.fspath(self.connection.settings_dict['NAME'])

    def open(self):
        self.connection.ensure_connection()

    def close(self):
        self.connection.close()

    def _records(self):
        return LocationRecord.objects.using(self.cfg.alias)

    def _pragma(self, name):
        with self.connection.cursor() as cursor:
            cursor.execute(f"PRAGMA {name}")
            return int(cursor.fetchone()[0])

    def _rows(self, sql):
        with self.connection.cursor() as cursor:
            cursor.execute(sql)
            columns = [col[0] for col in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]

    # -------- ingestion --------
    def insert(self, report, *, server_ip, user_agent):
        now = timezone.now()
        return self._records().create(
            latitude=report.latitude,
            longitude=report.longitude,
            altitude=report.altitude,
            timestamp=report.timestamp or now.isoformat(),
            machine_name=report.machine_name,
            user_name=report.user_name,
            location_source=report.location_source,
            public_ip=report.public_ip,
            city=report.city,
            country=report.country,
            accuracy=report.accuracy,
            speed=report.speed,
            received_at=now,
            server_ip=server_ip,
            user_agent=user_agent,
        )

    # -------- queries --------
    def by_machine(self, machine_name, *, limit):
        return list(self._records().filter(machine_name=machine_name).order_by(*RECENT_ORDER).values()[:limit])

    def by_date(self, day, *, limit):
        # date() of an unparseable timestamp is NULL and never matches
        observed_on = Func(F('timestamp'), function='DATE', output_field=CharField())
        return list(
            self._records()
            .annotate(observed_on=observed_on)
            .filter(observed_on=day)
            .order_by(*RECENT_ORDER)
            .values(*[f.attname for f in LocationRecord._meta.concrete_fields])[:limit]
        )

    def page(self, *, limit, offset):
        return list(self._records().order_by(*RECENT_ORDER).values()[offset:offset + limit])

    def recent_for_machine(self, machine_name, *, hours, limit):
        records = self._records().filter(machine_name=machine_name)
        try:
            records = records.filter(created_at__gte=timezone.now() - timedelta(hours=hours))
        except OverflowError:
            # Window reaches past datetime.min: every record is inside it
            pass
        return list(
            records
            .order_by(*RECENT_ORDER)
            .values()[:limit]
        )

    # -------- aggregation --------
    def count(self):
        return self._records().count()

    def roster(self):
        return list(
            self._records()
            .values('machine_name')
            .annotate(count=Count('id'), last_seen=Max('created_at'), first_seen=Min('created_at'))
            .order_by('-last_seen', 'machine_name')
        )

    def totals(self):
        return self._records().aggregate(
            total_locations=Count('id'),
            unique_machines=Count('machine_name', distinct=True),
            unique_users=Count('user_name', distinct=True),
            oldest_record=Min('created_at'),
            newest_record=Max('created_at'),
        )

    def file_size(self):
        return os.path.getsize(self.path) if os.path.exists(self.path) else 0

    def file_times(self):
        if not os.path.exists(self.path):
            return {'last_modified': None, 'created': None}
        stat = os.stat(self.path)
        created = getattr(stat, 'st_birthtime', stat.st_ctime)
        return {
            'last_modified': datetime.fromtimestamp(stat.st_mtime, tz=dt_timezone.utc),
            'created': datetime.fromtimestamp(created, tz=dt_timezone.utc),
        }

    def page_stats(self):
        page_count = self._pragma('page_count')
        page_size = self._pragma('page_size')
        return {'page_count': page_count, 'page_size': page_size, 'bytes': page_count * page_size}

    def columns(self):
        return self._rows(f"PRAGMA table_info({LocationRecord._meta.db_table})")

    def indexes(self):
        return self._rows(f"PRAGMA index_list({LocationRecord._meta.db_table})")

    def daily_activity(self, *, days=30):
        since = timezone.now() - timedelta(days=days)
        return list(
            self._records()
            .filter(created_at__gte=since)
            .annotate(date=TruncDate('created_at'))
            .values('date')
            .annotate(locations_count=Count('id'), machines_count=Count('machine_name', distinct=True))
            .order_by('-date')[:days]
        )

    def machine_summary(self):
        rows = list(
            self._records()
            .values('machine_name')
            .annotate(
                total_locations=Count('id'),
                first_location=Min('created_at'),
                last_location=Max('created_at'),
                avg_accuracy=Avg('accuracy'),
            )
            .order_by('-total_locations', 'machine_name')
        )
        for row in rows:
            if row['avg_accuracy'] is not None:
                row['avg_accuracy'] = round_half_up(row['avg_accuracy'], 2)
        return rows

    # -------- admin --------
    def clear_all(self):
        table = LocationRecord._meta.db_table
        with transaction.atomic(using=self.cfg.alias):
            deleted, _ = self._records().all().delete()
            # Restart AUTOINCREMENT ids at 1
            with self.connection.cursor() as cursor:
                cursor.execute("DELETE FROM sqlite_sequence WHERE name = %s", [table])
        return deleted

    def clear_machine(self, machine_name):
        with transaction.atomic(using=self.cfg.alias):
            deleted, _ = self._records().filter(machine_name=machine_name).delete()
        return deleted


def get_store():
    return apps.get_app_config('locations').store
