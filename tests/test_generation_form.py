from quizmaster.constants.quiz_constants import TOPIC_SUGGESTIONS
from quizmaster.core.generation_form import GenerationForm, form_options
from quizmaster.core.models import Difficulty


class TestGenerationForm:
    def test_defaults(self):
        form = GenerationForm()
        assert form.topic == ""
        assert form.difficulty is Difficulty.INTERMEDIATE
        assert not form.can_submit(is_generating=False)

    def test_whitespace_topic_cannot_submit(self):
        assert not GenerationForm(topic="   ").can_submit(is_generating=False)

    def test_cannot_submit_while_generating(self):
        assert not GenerationForm(topic="Docker").can_submit(is_generating=True)

    def test_suggestion_replaces_topic(self):
        form = GenerationForm(topic="something else")
        form.apply_suggestion(TOPIC_SUGGESTIONS[0])
        assert form.topic == TOPIC_SUGGESTIONS[0]
        assert form.can_submit(is_generating=False)

    def test_form_options(self):
        options = form_options()
        assert options["difficulties"] == ["Beginner", "Intermediate", "Advanced", "Expert"]
        assert options["default_difficulty"] == "Intermediate"
        assert options["suggestions"] == list(TOPIC_SUGGESTIONS)
