import joblib
import math
import pytest

from sentiment_analysis.core.records import SentimentData, SentimentPrediction
from sentiment_analysis.experiments import (
    BinaryClassificationEvaluator,
    LearningPipeline,
    PredictionModel,
)
from sentiment_analysis.models import FastTreeBinaryClassifier, TextFeaturizer
from sentiment_analysis.prepare_dataset import TextLoader


def _small_tree():
    return FastTreeBinaryClassifier(num_leaves=5, num_trees=5, min_documents_in_leafs=2)


@pytest.fixture
def model(train_tsv):
    pipeline = LearningPipeline()
    pipeline.add(TextLoader(train_tsv)).add(TextFeaturizer()).add(_small_tree())
    return pipeline.train()


def test_train_returns_prediction_model(model):
    assert isinstance(model, PredictionModel)
    assert [name for name, _ in model.pipeline.steps] == ["textfeaturizer_0", "classifier"]


def test_predict_records_and_strings(model):
    preds = model.predict([SentimentData("good great happy movie"), "bad awful boring movie"])
    assert all(isinstance(p, SentimentPrediction) for p in preds)
    assert [p.sentiment for p in preds] == [True, False]
    assert preds[0].label_name == "Positive"
    assert preds[1].label_name == "Negative"
    assert preds[0].probability > 0.5 > preds[1].probability
    assert preds[0].score > 0 > preds[1].score


def test_predict_empty_list(model):
    assert model.predict([]) == []


def test_write_and_read_round_trip(model, tmp_path):
    path = model.write(tmp_path / "nested" / "Model.joblib")
    assert path.exists()
    loaded = PredictionModel.read(path)
    texts = ["good fun great film", "awful dull bad film", "unseen words here"]
    assert loaded.predict(texts) == model.predict(texts)


def test_read_rejects_other_objects(tmp_path):
    path = tmp_path / "other.joblib"
    joblib.dump({"not": "a model"}, path)
    with pytest.raises(TypeError):
        PredictionModel.read(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PredictionModel.read(tmp_path / "missing.joblib")


def test_evaluator_on_seen_sentences(model, test_tsv):
    metrics = BinaryClassificationEvaluator().evaluate(model, TextLoader(test_tsv))
    assert metrics.accuracy == 1.0
    assert metrics.auc == 1.0
    assert metrics.f1_score == 1.0
    assert metrics.n_samples == 8
    assert not math.isnan(metrics.log_loss)


def test_loader_must_come_first(train_tsv):
    pipeline = LearningPipeline().add(TextFeaturizer())
    with pytest.raises(ValueError):
        pipeline.add(TextLoader(train_tsv))


def test_only_one_loader(train_tsv):
    pipeline = LearningPipeline().add(TextLoader(train_tsv))
    with pytest.raises(ValueError):
        pipeline.add(TextLoader(train_tsv))


def test_trainer_must_be_last(train_tsv):
    pipeline = LearningPipeline().add(TextLoader(train_tsv)).add(_small_tree())
    with pytest.raises(ValueError):
        pipeline.add(TextFeaturizer())


def test_unsupported_stage():
    with pytest.raises(TypeError):
        LearningPipeline().add("not a stage")


def test_train_needs_loader_and_trainer(train_tsv):
    with pytest.raises(ValueError):
        LearningPipeline().add(TextFeaturizer()).add(_small_tree()).train()
    with pytest.raises(ValueError):
        LearningPipeline().add(TextLoader(train_tsv)).add(TextFeaturizer()).train()


def test_predict_rejects_a_single_string(model):
    with pytest.raises(TypeError):
        model.predict("good great happy movie")
    with pytest.raises(TypeError):
        model.predict_proba("good great happy movie")
    assert model.predict_one("good great happy movie").sentiment is True


def test_train_with_only_empty_texts_names_the_file(make_tsv):
    path = make_tsv("blank.tsv", [(1, ""), (0, "   ")])
    pipeline = LearningPipeline().add(TextLoader(path)).add(TextFeaturizer()).add(_small_tree())
    with pytest.raises(ValueError, match="blank.tsv"):
        pipeline.train()
