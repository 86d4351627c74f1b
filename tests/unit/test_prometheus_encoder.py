"""Tests for the Prometheus text format encoder."""

import pytest

from namenode_exporter.core.encoding.prometheus import CONTENT_TYPE, encode_metrics
from namenode_exporter.core.metrics import counter_descriptor, gauge_descriptor, sample
from namenode_exporter.core.models import MetricDescriptor
from namenode_exporter.core.translate import translate
from tests.jmx_samples import ALL_BEANS, EXPECTED_VALUES, envelope

UP = gauge_descriptor("namenode", "", "up", "Could the namenode be reached.")
LOG_ERROR = counter_descriptor("namenode", "jvm", "log_error", "Number of error logs.")


class TestPrometheusEncoder:
    """Tests for encode_metrics()."""

    @pytest.mark.encoding
    def test_content_type(self) -> None:
        assert CONTENT_TYPE == "text/plain; version=0.0.4; charset=utf-8"

    @pytest.mark.encoding
    def test_empty_input(self) -> None:
        assert encode_metrics([]) == ""

    @pytest.mark.encoding
    def test_single_gauge(self) -> None:
        assert encode_metrics([sample(UP, 1)]) == (
            "# HELP namenode_up Could the namenode be reached.\n"
            "# TYPE namenode_up gauge\n"
            "namenode_up 1.0\n"
        )

    @pytest.mark.encoding
    def test_counter_type_line(self) -> None:
        output = encode_metrics([sample(LOG_ERROR, 21)])
        assert "# TYPE namenode_jvm_log_error counter\n" in output

    @pytest.mark.encoding
    def test_large_integers_are_exact(self) -> None:
        desc = gauge_descriptor("namenode", "dfs", "capacity_bytes_total", "h")
        output = encode_metrics([sample(desc, 982347489280)])
        assert output.endswith("namenode_dfs_capacity_bytes_total 982347489280.0\n")

    @pytest.mark.encoding
    def test_floats_keep_full_precision(self) -> None:
        desc = gauge_descriptor("namenode", "dfs", "percent_used", "h")
        assert "namenode_dfs_percent_used 12.312132\n" in encode_metrics(
            [sample(desc, 12.312132)]
        )

    @pytest.mark.encoding
    @pytest.mark.parametrize(
        ("value", "text"),
        [(float("nan"), "NaN"), (float("inf"), "+Inf"), (float("-inf"), "-Inf")],
    )
    def test_special_values(self, value: float, text: str) -> None:
        assert encode_metrics([sample(UP, value)]).endswith(f"namenode_up {text}\n")

    @pytest.mark.encoding
    def test_help_is_escaped(self) -> None:
        desc = MetricDescriptor(name="x", help="back\\slash\nnewline")
        assert "# HELP x back\\\\slash\\nnewline\n" in encode_metrics([sample(desc, 1)])

    @pytest.mark.encoding
    def test_samples_of_one_family_share_headers(self) -> None:
        desc = MetricDescriptor(name="x", help="h")
        output = encode_metrics([sample(desc, 1), sample(UP, 1), sample(desc, 2)])
        assert output.count("# TYPE x gauge") == 1
        assert output.index("x 2.0") < output.index("# HELP namenode_up")

    @pytest.mark.encoding
    def test_sample_lines_carry_no_labels(self) -> None:
        assert "{" not in encode_metrics(translate(envelope(*ALL_BEANS)))

    @pytest.mark.encoding
    @pytest.mark.tier(1)
    def test_full_cycle_lists_every_family_once(self) -> None:
        output = encode_metrics(translate(envelope(*ALL_BEANS)))
        type_lines = [line for line in output.splitlines() if line.startswith("# TYPE")]
        assert [line.split()[2] for line in type_lines] == list(EXPECTED_VALUES)
        assert "namenode_uptime_seconds 5403182.0\n" in output
