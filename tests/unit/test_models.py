import pytest

from depbump.models import DependencySelection, DistTags, UpdateCandidate, UpdateTarget


def test_dist_tags_from_payload(sample_dist_tags_payload):
    """Test that known channels are kept and unknown tags are dropped."""
    dist_tags = DistTags.from_payload(sample_dist_tags_payload)

    assert dist_tags.latest == "18.2.0"
    assert dist_tags.next == "18.3.0-canary-a1b2c3"
    assert dist_tags.rc == "19.0.0-rc.1"
    assert dist_tags.alpha is None
    assert not hasattr(dist_tags, "experimental")


def test_dist_tags_from_payload_requires_latest():
    """Test that a payload without a string latest is rejected."""
    with pytest.raises(ValueError):
        DistTags.from_payload({"next": "2.0.0-rc.1"})
    with pytest.raises(ValueError):
        DistTags.from_payload({"latest": 3})
    with pytest.raises(ValueError):
        DistTags.from_payload(["1.0.0"])


def test_dist_tags_ignores_non_string_channels():
    """Test that malformed channel values are treated as absent."""
    dist_tags = DistTags.from_payload({"latest": "1.0.0", "beta": {"version": "2.0.0-beta"}})
    assert dist_tags.beta is None


def test_dist_tags_channels_in_rank_order():
    """Test that channels are yielded next, canary, rc, beta, alpha."""
    dist_tags = DistTags(latest="1.0.0", alpha="a", rc="r", next="n")
    assert list(dist_tags.channels()) == [("next", "n"), ("rc", "r"), ("alpha", "a")]


def test_update_candidate_install_spec():
    """Test that install_spec is name@candidate."""
    candidate = UpdateCandidate(name="@types/node", current_version="^20.0.0", candidate_version="20.11.5")
    assert candidate.install_spec == "@types/node@20.11.5"


def test_dependency_selection_defaults_to_everything():
    """Test that no flags selects every dependency class."""
    selection = DependencySelection()
    assert selection.includes_production
    assert selection.includes_development
    assert selection.includes_optional


def test_dependency_selection_single_class():
    """Test that one flag restricts to that class only."""
    selection = DependencySelection(development=True)
    assert not selection.includes_production
    assert selection.includes_development
    assert not selection.includes_optional


def test_update_target_from_value():
    """Test that targets round-trip through their CLI names."""
    assert UpdateTarget("pre") is UpdateTarget.PRE
    assert [target.value for target in UpdateTarget] == [
        "latest", "semver", "major", "minor", "patch", "pre",
    ]
