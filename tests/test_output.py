"""Tests for output formatting."""

import io
import json

from rich.console import Console

from moduletypes.domain import Module, ModuleClassification, ModuleRecord
from moduletypes.output import emit, emit_success, _auto_columns, _format_value


class TestEmit:

    def test_jsonl_uses_to_dict(self, capsys):
        emit([ModuleClassification(Module("app"), True, True, False), {"module": "raw"}])
        lines = capsys.readouterr().out.splitlines()
        assert json.loads(lines[0])['android_gradle'] is True
        assert json.loads(lines[1]) == {"module": "raw"}

    def test_jsonl_to_stderr(self, capsys):
        emit([ModuleRecord.create("app")], err=True)
        captured = capsys.readouterr()
        assert captured.out == ''
        assert json.loads(captured.err) == {"name": "app", "facets": []}

    def test_table(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120)
        emit([ModuleClassification(Module("app"), False, True, False)], pretty=True, console=console)
        text = buffer.getvalue()
        assert 'app' in text
        assert 'gradle' in text
        assert 'Yes' in text

    def test_table_empty(self):
        buffer = io.StringIO()
        emit([], pretty=True, console=Console(file=buffer))
        assert 'No results found' in buffer.getvalue()

    def test_emit_success(self, capsys):
        emit_success("done", data={"modules": 2})
        assert json.loads(capsys.readouterr().out) == {
            'success': True, 'message': 'done', 'data': {'modules': 2}
        }


class TestFormatting:

    def test_auto_columns_prefers_module_fields(self):
        columns = _auto_columns([{'zeta': 1, 'kobalt': False, 'module': 'a', 'gradle': True}])
        assert columns == ['module', 'gradle', 'kobalt', 'zeta']

    def test_format_value(self):
        assert _format_value(None) == ''
        assert _format_value(True) == 'Yes'
        assert _format_value(False) == 'No'
        assert _format_value(['a', 'b', 'c', 'd']) == 'a, b, c (+1 more)'
        assert _format_value({'a': 1}) == '{...}'
        assert _format_value('x' * 60) == 'x' * 47 + '...'
