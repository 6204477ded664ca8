import json
import os
import shutil

from tqdm import tqdm

from wilayah_api.engine.errors import OutputWriteError, RemovalError


class ApiGenerator:
    """
    Walks provinces -> regencies -> districts -> villages and writes one JSON
    file per entity and one per parent-scoped listing under `output_dir`.
    """
    def __init__(self, repository, output_dir: str, progress: bool = True):
        self.repository = repository
        self.output_dir = os.path.normpath(output_dir)
        self.progress = progress
        self.written = 0

    def _remove_entry(self, path: str):
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except OSError as e:
            raise RemovalError(path) from e

    def _make_directories(self, dir_path: str):
        try:
            os.makedirs(dir_path, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(dir_path, e) from e

    def clear_output_dir(self):
        """Empties the output directory, keeping the directory itself. Creates it if missing."""
        if os.path.isdir(self.output_dir):
            try:
                entries = os.listdir(self.output_dir)
            except OSError as e:
                print(f"[WARN] Could not list '{self.output_dir}': {e}")
                entries = []
            for entry in entries:
                try:
                    self._remove_entry(os.path.join(self.output_dir, entry))
                except RemovalError as e:
                    print(f"[WARN] {e}")
        self._make_directories(self.output_dir)

    def write_artifact(self, uri: str, data):
        file_path = os.path.join(self.output_dir, uri.lstrip('/'))
        self._make_directories(os.path.dirname(file_path))
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(json.dumps(data, indent=2, ensure_ascii=False))
        except OSError as e:
            raise OutputWriteError(file_path, e) from e
        self.written += 1
        tqdm.write(f"+ {uri}")

    def generate(self) -> int:
        """Writes every artifact reachable from provinces.csv. Returns how many were written."""
        self.written = 0
        provinces = self.repository.get_provinces()
        self.write_artifact('/provinces.json', provinces)

        for province in tqdm(provinces, desc="Provinces", disable=not self.progress):
            regencies = self.repository.get_regencies_by_province_id(province['id'])
            self.write_artifact(f"/regencies/{province['id']}.json", regencies)
            self.write_artifact(f"/province/{province['id']}.json", province)

            for regency in regencies:
                districts = self.repository.get_districts_by_regency_id(regency['id'])
                self.write_artifact(f"/districts/{regency['id']}.json", districts)
                self.write_artifact(f"/regency/{regency['id']}.json", regency)

                for district in districts:
                    villages = self.repository.get_villages_by_district_id(district['id'])
                    self.write_artifact(f"/villages/{district['id']}.json", villages)
                    self.write_artifact(f"/district/{district['id']}.json", district)

                    for village in villages:
                        self.write_artifact(f"/village/{village['id']}.json", village)

        return self.written
