import pytest

from wilayah_api.engine.repository import Repository


def write_table(directory, name, lines):
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    write_table(directory, "provinces.csv", ["11,Aceh", "12,Sumatera Utara", "13,Sumatera Barat"])
    write_table(directory, "regencies.csv", [
        "1101,11,Kab. Simeulue",
        "1201,12,Kab. Nias",
        "1102,11,Kab. Aceh Singkil",
    ])
    write_table(directory, "districts.csv", [
        "110101,1101,Teupah Selatan",
        "",
        "110102,1101,Simeulue Timur",
        "120101,1201,Idanoi",
    ])
    write_table(directory, "villages.csv", [
        "1101012001,110101,Long Pudun",
        "1101012002,110101,Labuhan Bajau",
        "1201012001,120101,Hilimbowo",
    ])
    return directory


@pytest.fixture
def repository(data_dir):
    return Repository(str(data_dir))
