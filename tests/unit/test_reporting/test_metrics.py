"""
Unit tests for metrics-mode reporting.

Covers group construction and ordering, name flattening, tag attachment and
the text serialisation of samples.
"""

import io

import pytest

from fscheck.collectors import StaticMountProvider
from fscheck.evaluation import DiskCheck
from fscheck.models import CheckConfig, Metric, MetricGroup, ThresholdConfig
from fscheck.reporting import (
    METRIC_DEFINITIONS,
    build_metric_groups,
    emit_metric_groups,
    format_group,
    format_metric,
    format_value,
)
from fscheck.validation import EmissionError

TS = 1700000000000

EXPECTED_ORDER = [
    "disk.critical",
    "disk.warning",
    "disk.percent_used",
    "disk.total_bytes",
    "disk.used_bytes",
    "disk.free_bytes",
    "disk.inodes_critical",
    "disk.inodes_warning",
    "disk.inodes_percent_used",
    "disk.inodes_total",
    "disk.inodes_used",
    "disk.inodes_free",
]


def _groups(mounts, extra_tags=None):
    config = CheckConfig(
        thresholds=ThresholdConfig(warning=80, critical=95),
        extra_tags=extra_tags or {},
    )
    result = DiskCheck(config, StaticMountProvider(mounts)).run()
    return {g.name: g for g in build_metric_groups(result, config, timestamp=TS)}


@pytest.mark.unit
class TestMetricGroup:
    """Test cases for the MetricGroup model."""

    def test_add_metric(self):
        group = MetricGroup(name="disk.critical", type="GAUGE", comment="Disk usage critical")
        group.add_metric({"mountpoint": "/"}, 1, TS)
        group.add_metric({"mountpoint": "/home"}, 0, TS)

        assert len(group.metrics) == 2
        assert group.metrics[0] == Metric(tags={"mountpoint": "/"}, value=1, timestamp=TS)

    def test_add_metric_copies_tags(self):
        group = MetricGroup(name="disk.critical", type="GAUGE", comment="")
        tags = {"mountpoint": "/"}
        group.add_metric(tags, 1, TS)
        tags["mountpoint"] = "/changed"
        assert group.metrics[0].tags == {"mountpoint": "/"}

    def test_export_name(self):
        assert MetricGroup(name="disk.inodes_percent_used", type="GAUGE", comment="").export_name == (
            "disk_inodes_percent_used"
        )


@pytest.mark.unit
class TestBuildMetricGroups:
    """Test cases for building groups from a check result."""

    def test_fixed_group_order(self, mount_factory):
        config = CheckConfig()
        result = DiskCheck(config, StaticMountProvider([mount_factory()])).run()
        groups = build_metric_groups(result, config, timestamp=TS)

        assert [g.name for g in groups] == EXPECTED_ORDER
        assert [d.name for d in METRIC_DEFINITIONS] == EXPECTED_ORDER

    def test_groups_present_without_mounts(self):
        config = CheckConfig()
        result = DiskCheck(config, StaticMountProvider([])).run()
        groups = build_metric_groups(result, config, timestamp=TS)

        assert len(groups) == 12
        assert all(g.metrics == [] for g in groups)

    def test_values(self, mount_factory):
        groups = _groups([mount_factory("/", bytes_total=1000, bytes_used=960, inodes_total=500, inodes_used=100)])

        assert groups["disk.critical"].metrics[0].value == 1
        assert groups["disk.warning"].metrics[0].value == 1
        assert groups["disk.percent_used"].metrics[0].value == pytest.approx(96.0)
        assert groups["disk.total_bytes"].metrics[0].value == 1000
        assert groups["disk.used_bytes"].metrics[0].value == 960
        assert groups["disk.free_bytes"].metrics[0].value == 40
        assert groups["disk.inodes_critical"].metrics[0].value == 0
        assert groups["disk.inodes_warning"].metrics[0].value == 0
        assert groups["disk.inodes_percent_used"].metrics[0].value == pytest.approx(20.0)
        assert groups["disk.inodes_total"].metrics[0].value == 500
        assert groups["disk.inodes_used"].metrics[0].value == 100
        assert groups["disk.inodes_free"].metrics[0].value == 400

    def test_warning_flag_only(self, mount_factory):
        groups = _groups([mount_factory("/", bytes_used=85)])
        assert groups["disk.critical"].metrics[0].value == 0
        assert groups["disk.warning"].metrics[0].value == 1

    def test_one_sample_per_mount_in_order(self, sample_mounts):
        groups = _groups(sample_mounts)
        assert [m.tags["mountpoint"] for m in groups["disk.percent_used"].metrics] == ["/", "/home"]

    def test_tags(self, mount_factory):
        groups = _groups([mount_factory("/", "ext4")], extra_tags={"env": "prod", "region": "us-west"})
        metric = groups["disk.total_bytes"].metrics[0]

        assert list(metric.tags.items()) == [
            ("mountpoint", "/"),
            ("fstype", "ext4"),
            ("env", "prod"),
            ("region", "us-west"),
        ]
        assert metric.timestamp == TS

    def test_default_timestamp_is_milliseconds(self, mount_factory):
        config = CheckConfig()
        result = DiskCheck(config, StaticMountProvider([mount_factory()])).run()
        groups = build_metric_groups(result, config)
        # Later than 2001-09-09 in milliseconds
        assert groups[0].metrics[0].timestamp > 10 ** 12


@pytest.mark.unit
class TestFormatting:
    """Test cases for the text serialisation."""

    @pytest.mark.parametrize("value,expected", [
        (0, "0"),
        (1, "1"),
        (42.0, "42"),
        (42.5, "42.5"),
        (1000000000000, "1000000000000"),
    ])
    def test_format_value(self, value, expected):
        assert format_value(value) == expected

    def test_format_metric(self):
        metric = Metric(tags={"mountpoint": "/", "fstype": "ext4"}, value=42.5, timestamp=TS)
        assert format_metric("disk_percent_used", metric) == (
            'disk_percent_used{mountpoint="/",fstype="ext4"} 42.5 1700000000000'
        )

    def test_format_metric_without_tags(self):
        assert format_metric("disk_critical", Metric(tags={}, value=0, timestamp=TS)) == "disk_critical 0 1700000000000"

    def test_label_escaping(self):
        metric = Metric(tags={"mountpoint": 'C:\\data "x"\n'}, value=1, timestamp=TS)
        assert format_metric("m", metric) == 'm{mountpoint="C:\\\\data \\"x\\"\\n"} 1 1700000000000'

    def test_format_group(self, mount_factory):
        groups = _groups([mount_factory("/", "ext4", bytes_total=1000, bytes_used=420)])
        assert format_group(groups["disk.percent_used"]) == [
            "# HELP disk_percent_used [GAUGE] Percentage of disk used",
            "# TYPE disk_percent_used gauge",
            'disk_percent_used{mountpoint="/",fstype="ext4"} 42 1700000000000',
        ]


@pytest.mark.unit
class TestEmitMetricGroups:
    """Test cases for writing the metric stream."""

    def test_emit(self, mount_factory):
        config = CheckConfig()
        result = DiskCheck(config, StaticMountProvider([mount_factory()])).run()
        stream = io.StringIO()
        emit_metric_groups(build_metric_groups(result, config, timestamp=TS), stream)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 12 * 3
        assert lines[0] == "# HELP disk_critical [GAUGE] Disk usage at or above the critical threshold"
        assert stream.getvalue().endswith("\n")
        assert not any("." in line.split("{")[0] for line in lines if not line.startswith("#"))

    def test_emit_nothing(self):
        stream = io.StringIO()
        emit_metric_groups([], stream)
        assert stream.getvalue() == ""

    def test_closed_stream_raises_emission_error(self, mount_factory):
        config = CheckConfig()
        result = DiskCheck(config, StaticMountProvider([mount_factory()])).run()
        stream = io.StringIO()
        stream.close()

        with pytest.raises(EmissionError):
            emit_metric_groups(build_metric_groups(result, config, timestamp=TS), stream)
