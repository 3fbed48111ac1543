# ==============================================
# Tests for PdfTableParser (orchestrator)
# ==============================================

from pdf_tables.config import AppConfig, GeminiConfig, NormalizerConfig
from pdf_tables.extraction import PdfTableExtractor
from pdf_tables.normalization import ParsedTable
from pdf_tables.pdf_table_parser import PdfTableParser


class TestPdfTableParser:

    def test_parse_buffer(self, app_config, fake_client, capsys):
        parser = PdfTableParser(app_config, extractor=PdfTableExtractor(fake_client))
        table = parser.parse_buffer(b"%PDF")

        assert table.columns[0] == "Column_1"
        assert table.to_dict()["columnTypes"]["Amount_Rs"] == "number"
        assert "✓ Parsed table: 5 columns, 3 rows" in capsys.readouterr().out

    def test_parse_file(self, app_config, fake_client, tmp_path):
        pdf = tmp_path / "t.pdf"
        pdf.write_bytes(b"%PDF")
        parser = PdfTableParser(app_config, extractor=PdfTableExtractor(fake_client))
        assert len(parser.parse_file(pdf).rows) == 3

    def test_failed_extraction_gives_empty_table(self, app_config, fake_client_factory):
        extractor = PdfTableExtractor(fake_client_factory(answer="garbage"))
        parser = PdfTableParser(app_config, extractor=extractor)
        assert parser.parse_buffer(b"%PDF") == ParsedTable.empty()

    def test_sample_size_comes_from_config(self, fake_client_factory):
        config = AppConfig(gemini=GeminiConfig(api_key="k"), normalizer=NormalizerConfig(sample_size=1))
        parser = PdfTableParser(config, extractor=PdfTableExtractor(fake_client_factory()))
        table = parser.normalize([{"Q": "1"}, {"Q": "many"}])
        assert table.rows == [{"Q": 1}, {"Q": "many"}]

    def test_builds_gemini_extractor_from_config(self, capsys):
        config = AppConfig(gemini=GeminiConfig(api_key=None))
        with PdfTableParser(config) as parser:
            assert parser.parse_buffer(b"%PDF") == ParsedTable.empty()
        assert "GEMINI_API_KEY" in capsys.readouterr().out
