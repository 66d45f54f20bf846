"""Tests for the local quotation file saver."""

import os

import pytest

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import StorageError
from src.pricing_domain.infrastructure.export.local_file_saver import LocalQuotationFileSaver


def test_save_writes_content_to_export_dir(tmp_path) -> None:
    saver = LocalQuotationFileSaver(str(tmp_path / "exports"))

    path = saver.save("Cantidad: 5\n", "cotizacion_Taza Cerámica.txt")

    assert path == os.path.join(str(tmp_path / "exports"), "cotizacion_Taza Cerámica.txt")
    with open(path, encoding="utf-8") as f:
        assert f.read() == "Cantidad: 5\n"


def test_save_replaces_path_separators_in_filename(tmp_path) -> None:
    saver = LocalQuotationFileSaver(str(tmp_path))

    path = saver.save("x", "cotizacion_Bolsa 30/40.txt")

    assert os.path.basename(path) == "cotizacion_Bolsa 30_40.txt"
    assert os.path.dirname(path) == str(tmp_path)


def test_export_dir_defaults_to_settings(mocker, tmp_path) -> None:
    mocker.patch.object(settings, "QUOTATION_EXPORT_DIR", str(tmp_path))

    assert LocalQuotationFileSaver().export_dir == str(tmp_path)


def test_write_failure_raises_storage_error(tmp_path, mocker) -> None:
    mocker.patch("builtins.open", side_effect=PermissionError("read-only"))

    with pytest.raises(StorageError):
        LocalQuotationFileSaver(str(tmp_path)).save("x", "cotizacion.txt")
