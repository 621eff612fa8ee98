"""Tests for the GiniTree estimator."""

import sys

import numpy as np
import pandas as pd
import pytest

from gini_tree import DataError, Decision, GiniTree, Leaf, settings

CAR_COLUMNS = ["age", "income", "credit_score"]


@pytest.fixture
def car_frame(car_data):
    X, y = car_data
    return pd.DataFrame(X, columns=CAR_COLUMNS), pd.Series(y, name="will_buy")


def test_defaults_come_from_settings():
    tree = GiniTree()
    assert tree.max_depth == settings.MAX_DEPTH
    assert tree.empty_label == settings.EMPTY_LABEL


def test_settings_overrides_are_picked_up(monkeypatch):
    monkeypatch.setattr(settings, "MAX_DEPTH", 7)
    monkeypatch.setattr(settings, "EMPTY_LABEL", 0)
    tree = GiniTree()
    assert (tree.max_depth, tree.empty_label) == (7, 0)


@pytest.mark.parametrize(
    "kwargs", [{"max_depth": 0}, {"max_depth": -3}, {"empty_label": 2}]
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        GiniTree(**kwargs)


def test_unfitted_tree():
    tree = GiniTree(max_depth=2)
    with pytest.raises(ValueError, match="Fit a tree"):
        tree.root
    with pytest.raises(ValueError):
        tree.predict([[1, 2]])
    with pytest.raises(ValueError):
        tree.n_features
    assert "not fitted" in str(tree)


def test_fit_and_predict(car_data):
    X, y = car_data
    tree = GiniTree(max_depth=3).fit(X, y)

    assert tree.root == Decision(feature=0, threshold=35.0, left=Leaf(0), right=Leaf(1))
    assert tree.depth == 1
    assert tree.n_leaves == 2
    assert tree.n_features == 3
    assert tree.feature_names is None
    assert tree.classes == [0, 1]
    assert tree.predict_one([30, 60000, 700]) == 0

    predictions = tree.predict(X)
    assert predictions.dtype == np.intp
    np.testing.assert_array_equal(predictions, y)


def test_predict_empty_batch(car_data):
    tree = GiniTree().fit(*car_data)
    assert tree.predict([]).shape == (0,)


def test_fit_on_dataframe(car_frame):
    X, y = car_frame
    tree = GiniTree(max_depth=3).fit(X, y)
    assert tree.feature_names == CAR_COLUMNS

    shuffled = X[["credit_score", "age", "income"]]
    np.testing.assert_array_equal(tree.predict(shuffled), y.to_numpy())


def test_predict_missing_column(car_frame):
    X, y = car_frame
    tree = GiniTree().fit(X, y)
    with pytest.raises(DataError, match="age"):
        tree.predict(X.drop(columns=["age"]))


def test_refit_replaces_tree(car_data):
    X, y = car_data
    tree = GiniTree().fit(X, y)
    tree.fit([[1], [2]], [1, 1])
    assert tree.root == Leaf(1)
    assert tree.n_features == 1
    assert tree.depth == 0


def test_fit_rejects_bad_labels(car_data):
    X, _ = car_data
    with pytest.raises(DataError):
        GiniTree().fit(X, [0, 1, 2, 0, 1])


def test_to_frame(car_frame):
    X, y = car_frame
    df = GiniTree(max_depth=3).fit(X, y).to_frame()

    assert list(df["node_id"]) == [0, 1, 2]
    assert list(df["kind"]) == ["decision", "leaf", "leaf"]
    assert df.loc[0, "feature_name"] == "age"
    assert df.loc[0, "threshold"] == 35.0
    assert df.loc[0, "gini"] == pytest.approx(0.48)
    assert df.loc[0, "score"] == 0.0
    assert pd.isna(df.loc[0, "parent_id"])
    assert list(df.loc[1:, "parent_id"]) == [0, 0]
    assert list(df.loc[1:, "label"]) == [0, 1]
    assert list(df["n_samples"]) == [5, 2, 3]


def test_to_frame_without_column_names(car_data):
    df = GiniTree().fit(*car_data).to_frame()
    assert df.loc[0, "feature_name"] == "x[0]"


def test_view_requires_graphviz(monkeypatch, car_data):
    tree = GiniTree().fit(*car_data)
    monkeypatch.setitem(sys.modules, "graphviz", None)
    with pytest.raises(ImportError, match="graphviz"):
        tree.view()


def test_repr_and_str(car_data):
    tree = GiniTree(max_depth=4, empty_label=0)
    assert repr(tree) == "GiniTree(max_depth=4, empty_label=0)"
    tree.fit(*car_data)
    assert str(tree).endswith("with depth 1 and 2 leaves")
