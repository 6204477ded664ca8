import csv
import os

from wilayah_api.engine.errors import SourceNotFoundError


class TableSchema:
    """
    Positional layout of one source table.
    `columns` is an ordered list of (position, field_name) pairs; the order is
    the field order of every record projected through this schema.
    """
    def __init__(self, file_name: str, columns: list, parent_position=None):
        if not columns:
            raise ValueError(f"Schema for '{file_name}' has no columns.")

        positions = [position for position, _ in columns]
        names = [name for _, name in columns]
        if any(position < 0 for position in positions):
            raise ValueError(f"Schema for '{file_name}' has a negative column position.")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Schema for '{file_name}' maps one position twice.")
        if len(set(names)) != len(names):
            raise ValueError(f"Schema for '{file_name}' repeats a field name.")
        if parent_position is not None and parent_position not in positions:
            raise ValueError(f"Parent position {parent_position} is not a column of '{file_name}'.")

        self.file_name = file_name
        self.columns = list(columns)
        self.parent_position = parent_position

    @classmethod
    def from_field_names(cls, file_name: str, field_names: list, parent_position=None):
        return cls(file_name, list(enumerate(field_names)), parent_position)

    @property
    def field_names(self):
        return [name for _, name in self.columns]

    def project(self, row: list) -> dict:
        # Absent and empty cells both become None; extra cells are ignored.
        return {name: (row[position] if position < len(row) else None) or None
                for position, name in self.columns}

    def matches_parent(self, row: list, parent_id: str) -> bool:
        return self.parent_position < len(row) and row[self.parent_position] == parent_id


PROVINCES = TableSchema('provinces.csv', [(0, 'id'), (1, 'name')])
REGENCIES = TableSchema('regencies.csv', [(0, 'id'), (1, 'province_id'), (2, 'name')], parent_position=1)
DISTRICTS = TableSchema('districts.csv', [(0, 'id'), (1, 'regency_id'), (2, 'name')], parent_position=1)
VILLAGES = TableSchema('villages.csv', [(0, 'id'), (1, 'district_id'), (2, 'name')], parent_position=1)


class Repository:
    """
    Read-only access to the administrative division tables in `data_dir`.
    Each table is parsed once, on first access, and kept for the lifetime of
    the instance; later calls never look at the file again.
    """
    def __init__(self, data_dir: str):
        self.data_dir = os.path.normpath(data_dir)
        self.caches = {}

    def _load(self, file_name: str) -> list:
        file_path = os.path.join(self.data_dir, file_name)
        try:
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                return [row for row in csv.reader(f) if row]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise SourceNotFoundError(file_name) from e

    def read_table(self, file_name: str, row_filter=None) -> list:
        if file_name not in self.caches:
            self.caches[file_name] = self._load(file_name)
        rows = self.caches[file_name]
        return [list(row) for row in rows if row_filter is None or row_filter(row)]

    def map_table(self, file_name: str, field_names: list, row_filter=None) -> list:
        schema = TableSchema.from_field_names(file_name, field_names)
        return self._map_schema(schema, row_filter)

    def _map_schema(self, schema: TableSchema, row_filter=None) -> list:
        return [schema.project(row) for row in self.read_table(schema.file_name, row_filter)]

    def _children_of(self, schema: TableSchema, parent_id: str) -> list:
        return self._map_schema(schema, lambda row: schema.matches_parent(row, parent_id))

    def get_provinces(self):
        return self._map_schema(PROVINCES)

    def get_regencies_by_province_id(self, province_id: str):
        return self._children_of(REGENCIES, province_id)

    def get_districts_by_regency_id(self, regency_id: str):
        return self._children_of(DISTRICTS, regency_id)

    def get_villages_by_district_id(self, district_id: str):
        return self._children_of(VILLAGES, district_id)
