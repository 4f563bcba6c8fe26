INTERCHANGE = 1


def as_int(value, default=0):
    """Coerce a GTFS flag column, treating blanks and junk as the default."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Stop:
    def __init__(self, stop_id, name, lat, lon, code="", zone_id="",
                 location_type=0, wheelchair_boarding=0):
        self.stop_id = str(stop_id)
        self.name = name or ""
        self.lat = float(lat)
        self.lon = float(lon)
        self.code = code or ""
        self.zone_id = zone_id or ""
        self.location_type = as_int(location_type)
        self.wheelchair_boarding = as_int(wheelchair_boarding)

    @classmethod
    def from_dict(cls, row):
        """Build a Stop from a row shaped like GTFS stops.txt."""
        return cls(
            stop_id=row['stop_id'],
            name=row.get('stop_name', ''),
            lat=row['stop_lat'],
            lon=row['stop_lon'],
            code=row.get('stop_code', ''),
            zone_id=row.get('zone_id', ''),
            location_type=row.get('location_type', 0),
            wheelchair_boarding=row.get('wheelchair_boarding', 0),
        )

    @property
    def is_interchange(self):
        return self.location_type == INTERCHANGE

    def to_dict(self):
        return {
            "stop_id": self.stop_id,
            "stop_code": self.code,
            "stop_name": self.name,
            "stop_lat": self.lat,
            "stop_lon": self.lon,
            "zone_id": self.zone_id,
            "location_type": self.location_type,
            "wheelchair_boarding": self.wheelchair_boarding,
        }

    def __eq__(self, other):
        return isinstance(other, Stop) and other.stop_id == self.stop_id

    def __hash__(self):
        return hash(self.stop_id)

    def __repr__(self):
        return f"Stop({self.stop_id}, {self.name}, {self.lat}, {self.lon})"
