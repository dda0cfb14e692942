"""Unit tests for the Supabase candidates repository."""

from datetime import date
from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from app.core.errors import BusinessError, DataIntegrityError
from app.models.candidate import CandidateCreate

STORED_ROW = {
    "id": 1,
    "first_name": "Juan",
    "last_name": "Pérez",
    "age": 35,
    "birth_date": "1990-05-15",
}


def _prepared() -> CandidateCreate:
    return CandidateCreate(
        first_name="Juan", last_name="Pérez", age=35, birth_date=date(1990, 5, 15)
    )


def _api_error(code: str) -> APIError:
    return APIError({"message": "boom", "code": code, "hint": None, "details": None})


class TestSaveCandidate:
    def test_inserts_snake_case_row(self, mock_candidates_table: MagicMock) -> None:
        """Given a prepared record, the insert payload uses column names."""
        from app.db.candidates import save_candidate

        mock_candidates_table.execute.return_value = MagicMock(data=[STORED_ROW])

        saved = save_candidate(_prepared())

        mock_candidates_table.insert.assert_called_once_with({
            "first_name": "Juan",
            "last_name": "Pérez",
            "age": 35,
            "birth_date": "1990-05-15",
        })
        assert saved.id == 1
        assert saved.birth_date == date(1990, 5, 15)

    def test_unique_violation_becomes_data_integrity_error(
        self, mock_candidates_table: MagicMock
    ) -> None:
        from app.db.candidates import save_candidate

        mock_candidates_table.execute.side_effect = _api_error("23505")

        with pytest.raises(DataIntegrityError) as exc_info:
            save_candidate(_prepared())
        assert exc_info.value.db_code == "23505"
        assert not isinstance(exc_info.value, BusinessError)

    def test_other_api_errors_propagate(self, mock_candidates_table: MagicMock) -> None:
        from app.db.candidates import save_candidate

        mock_candidates_table.execute.side_effect = _api_error("PGRST301")

        with pytest.raises(APIError):
            save_candidate(_prepared())

    def test_empty_insert_result_is_an_error(self, mock_candidates_table: MagicMock) -> None:
        from app.db.candidates import save_candidate

        mock_candidates_table.execute.return_value = MagicMock(data=[])

        with pytest.raises(RuntimeError):
            save_candidate(_prepared())


class TestFindAllCandidates:
    def test_maps_rows(self, mock_candidates_table: MagicMock) -> None:
        from app.db.candidates import find_all_candidates

        mock_candidates_table.execute.return_value = MagicMock(
            data=[STORED_ROW, {**STORED_ROW, "id": 2, "first_name": "Ana"}]
        )

        result = find_all_candidates()

        mock_candidates_table.select.assert_called_once_with("*")
        assert [c.id for c in result] == [1, 2]
        assert result[1].first_name == "Ana"

    def test_none_data_is_empty(self, mock_candidates_table: MagicMock) -> None:
        from app.db.candidates import find_all_candidates

        mock_candidates_table.execute.return_value = MagicMock(data=None)
        assert find_all_candidates() == []
