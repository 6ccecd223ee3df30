"""Tests for groupcal.cli — command line entry point."""

import json

from groupcal.cli import EXIT_DATA_ERROR, EXIT_INPUT_ERROR, EXIT_OK, main


def _write(tmp_path, document):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


class TestMain:
    def test_prints_resolved_month(self, data_file, capsys):
        code = main(["board-games", "--date", "01-2024", "--data", data_file])
        assert code == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "eventName": "Board games",
            "time": "01-2024",
            "groupedChoices": {
                "alice": {"available": [13, 27, 29], "maybe_available": [], "unavailable": [15]},
                "bob": {"available": [3], "maybe_available": [10], "unavailable": [17, 24]},
                "carol": {"available": [], "maybe_available": [], "unavailable": []},
            },
        }

    def test_unknown_event(self, data_file, capsys):
        assert main(["nope", "--date", "01-2024", "--data", data_file]) == EXIT_DATA_ERROR
        assert capsys.readouterr().out == ""

    def test_bad_date(self, data_file):
        assert main(["board-games", "--date", "2024-02", "--data", data_file]) == EXIT_INPUT_ERROR

    def test_missing_data_file(self, tmp_path):
        missing = str(tmp_path / "absent.json")
        assert main(["board-games", "--date", "01-2024", "--data", missing]) == EXIT_DATA_ERROR

    def test_invalid_data_file(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["board-games", "--data", str(path)]) == EXIT_DATA_ERROR

    def test_unsupported_rule(self, tmp_path, sample_document):
        sample_document["events"][0]["rules"][0]["rule"] = "FREQ=MONTHLY;INTERVAL=1;BYDAY=MO"
        path = _write(tmp_path, sample_document)
        assert main(["board-games", "--date", "01-2024", "--data", path]) == EXIT_INPUT_ERROR

    def test_rule_for_user_outside_roster(self, tmp_path, sample_document):
        sample_document["events"][0]["rules"][0]["username"] = "ghost"
        path = _write(tmp_path, sample_document)
        assert main(["board-games", "--date", "01-2024", "--data", path]) == EXIT_DATA_ERROR
