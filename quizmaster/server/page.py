"""The single HTML page served to the browser (and the desktop window)."""

from __future__ import annotations

import json

from quizmaster.constants import about, ui_constants
from quizmaster.constants.quiz_constants import FEEDBACK_ERROR_MESSAGE
from quizmaster.styling import Styles

_PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>__TITLE__</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>__STYLES__</style>
  </head>
  <body>
    <header>
      <button id="brand" class="brand">__TITLE__</button>
      <div class="row">
        <button id="history-button" class="secondary-button hidden"></button>
        <span class="muted">__BUILD__</span>
      </div>
    </header>
    <main>
      <div id="error-banner" class="error-banner hidden"></div>

      <section id="home-view" class="hidden">
        <h1>__TITLE__</h1>
        <p class="muted">__TAGLINE__</p>
        <form id="generate-form" class="card">
          <label for="topic-input">Topic</label>
          <input id="topic-input" type="text" autocomplete="off" required />
          <p>Difficulty</p>
          <div id="difficulty-chips"></div>
          <p><button id="generate-button" type="submit" class="primary-button"></button></p>
        </form>
        <div class="card">
          <p class="muted">Try a suggestion</p>
          <div id="suggestion-chips"></div>
        </div>
      </section>

      <section id="quiz-view" class="hidden">
        <div class="row muted">
          <span id="quiz-position"></span>
          <span id="quiz-meta"></span>
        </div>
        <div class="progress-track"><div id="quiz-progress" class="progress-fill"></div></div>
        <div class="card">
          <div id="quiz-question"></div>
          <div id="quiz-options"></div>
          <p><button id="next-button" class="primary-button" disabled></button></p>
        </div>
      </section>

      <section id="results-view" class="hidden">
        <div class="card">
          <h2 id="results-verdict"></h2>
          <p id="results-percentage"></p>
          <p id="results-score" class="muted"></p>
          <p id="results-chart" class="muted"></p>
          <h3>AI Analysis</h3>
          <div id="results-feedback"></div>
        </div>
        <div id="results-breakdown"></div>
        <div class="row">
          <button id="dashboard-button" class="secondary-button"></button>
          <button id="retry-button" class="primary-button"></button>
        </div>
      </section>

      <section id="history-view" class="hidden">
        <div class="row">
          <button id="back-button" class="secondary-button">&larr; Back</button>
          <button id="clear-history-button" class="secondary-button"></button>
        </div>
        <div id="history-list"></div>
      </section>
    </main>
    <footer>
      <p>&copy; <span id="year"></span> __TITLE__</p>
      <p>__POWERED_BY__</p>
    </footer>
    <script>
      const UI = __UI_TEXT__;
      const $ = (id) => document.getElementById(id);
      const views = { HOME: $('home-view'), QUIZ: $('quiz-view'), RESULTS: $('results-view'), HISTORY: $('history-view') };

      let state = null;
      let selectedDifficulty = null;
      let shownResultId = null;
      let pollHandle = null;

      function setVisibility(element, isVisible) {
        element.classList.toggle('hidden', !isVisible);
      }

      async function api(method, path, body) {
        const options = { method, headers: { 'Content-Type': 'application/json' } };
        if (body !== undefined) {
          options.body = JSON.stringify(body);
        }
        const response = await fetch(path, options);
        const payload = await response.json().catch(() => ({}));
        if (!response.ok) {
          throw new Error(payload.detail || `Request failed (${response.status})`);
        }
        return payload;
      }

      async function refreshState() {
        try {
          state = await api('GET', '/state');
          render();
        } catch (error) {
          console.error('Error fetching state:', error);
        }
      }

      function render() {
        Object.entries(views).forEach(([name, element]) => setVisibility(element, state.view === name));
        setVisibility($('history-button'), state.view === 'HOME');
        const banner = $('error-banner');
        banner.textContent = state.error || '';
        setVisibility(banner, Boolean(state.error));

        if (state.view === 'HOME') renderHome();
        if (state.view === 'QUIZ') renderQuiz();
        if (state.view === 'RESULTS') renderResults();
        if (state.view !== 'RESULTS') shownResultId = null;

        if (state.is_generating && !pollHandle) {
          pollHandle = setInterval(refreshState, 2000);
        } else if (!state.is_generating && pollHandle) {
          clearInterval(pollHandle);
          pollHandle = null;
        }
      }

      function renderHome() {
        const chips = $('difficulty-chips');
        if (!chips.childElementCount) {
          selectedDifficulty = state.form.default_difficulty;
          state.form.difficulties.forEach((difficulty) => {
            const chip = document.createElement('button');
            chip.type = 'button';
            chip.className = 'chip';
            chip.textContent = difficulty;
            chip.dataset.value = difficulty;
            chip.addEventListener('click', () => { selectedDifficulty = difficulty; renderHome(); });
            chips.appendChild(chip);
          });
          state.form.suggestions.forEach((suggestion) => {
            const chip = document.createElement('button');
            chip.type = 'button';
            chip.className = 'chip';
            chip.textContent = suggestion;
            chip.addEventListener('click', () => { $('topic-input').value = suggestion; updateGenerateButton(); });
            $('suggestion-chips').appendChild(chip);
          });
        }
        chips.querySelectorAll('.chip').forEach((chip) => chip.classList.toggle('active', chip.dataset.value === selectedDifficulty));
        updateGenerateButton();
      }

      function updateGenerateButton() {
        const button = $('generate-button');
        const generating = Boolean(state && state.is_generating);
        button.textContent = generating ? UI.generating : UI.generate;
        button.disabled = generating || !$('topic-input').value.trim();
        $('topic-input').disabled = generating;
      }

      async function submitGenerate(event) {
        event.preventDefault();
        const topic = $('topic-input').value;
        if (!topic.trim() || state.is_generating) return;
        state.is_generating = true;
        state.error = null;
        render();
        try {
          state = await api('POST', '/generate', { topic, difficulty: selectedDifficulty });
        } catch (error) {
          console.error('Error generating quiz:', error);
          await refreshState();
          return;
        }
        render();
      }

      function renderQuiz() {
        const step = state.quiz;
        if (!step) return;
        $('quiz-position').textContent = `Question ${step.question_number} of ${step.question_count}`;
        $('quiz-meta').textContent = `${step.topic} \\u2022 ${step.difficulty}`;
        $('quiz-progress').style.width = `${Math.round(step.progress * 100)}%`;
        $('quiz-question').innerHTML = step.question_html;
        const options = $('quiz-options');
        options.innerHTML = '';
        step.options_html.forEach((optionHtml, index) => {
          const button = document.createElement('button');
          button.className = 'option-button' + (step.selected_option === index ? ' selected' : '');
          button.innerHTML = optionHtml;
          button.addEventListener('click', () => selectOption(index));
          options.appendChild(button);
        });
        const next = $('next-button');
        next.textContent = step.is_last_question ? UI.finish : UI.next;
        next.disabled = step.selected_option === null;
      }

      async function selectOption(index) {
        try {
          const step = await api('POST', '/quiz/select', { option_index: index });
          state.quiz = step;
          renderQuiz();
        } catch (error) {
          console.error('Error selecting option:', error);
        }
      }

      async function advance() {
        try {
          state = await api('POST', '/quiz/advance');
          render();
        } catch (error) {
          console.error('Error advancing quiz:', error);
        }
      }

      async function renderResults() {
        if (!state.has_results || shownResultId === state.result_id) return;
        shownResultId = state.result_id;
        let view;
        try {
          view = await api('GET', '/results');
        } catch (error) {
          console.error('Error loading results:', error);
          return;
        }
        $('results-verdict').textContent = view.verdict;
        $('results-percentage').textContent = `${view.percentage}%`;
        $('results-score').textContent = `Score: ${view.score} / ${view.total_questions}`;
        $('results-chart').textContent = `${view.chart.correct} correct \\u00b7 ${view.chart.incorrect} incorrect`;
        $('retry-button').textContent = UI.new_quiz.replace('{topic}', view.topic);
        const breakdown = $('results-breakdown');
        breakdown.innerHTML = '';
        view.breakdown.forEach((row) => {
          const card = document.createElement('div');
          card.className = 'card';
          const mark = row.is_correct ? '<span class="correct">&#10003;</span>' : '<span class="incorrect">&#10007;</span>';
          let html = `<div class="row"><strong>${row.number}.</strong>${mark}</div>${row.question_html}`;
          html += `<p class="${row.is_correct ? 'correct' : 'incorrect'}">Your answer: ${row.selected_option_html ?? '-'}</p>`;
          if (!row.is_correct) {
            html += `<p class="correct">Correct answer: ${row.correct_option_html}</p>`;
          }
          html += `<div class="muted">Explanation: ${row.explanation_html}</div>`;
          card.innerHTML = html;
          breakdown.appendChild(card);
        });
        loadFeedback(view.quiz_id);
      }

      async function loadFeedback(resultId) {
        const target = $('results-feedback');
        target.textContent = UI.feedback_loading;
        try {
          const payload = await api('GET', '/results/feedback');
          if (shownResultId === resultId) {
            target.innerHTML = payload.feedback_html;
          }
        } catch (error) {
          console.error('Error loading feedback:', error);
          if (shownResultId === resultId) {
            target.textContent = UI.feedback_error;
          }
        }
      }

      async function loadHistory() {
        const list = $('history-list');
        list.innerHTML = '';
        const payload = await api('GET', '/history');
        $('clear-history-button').disabled = payload.entries.length === 0;
        if (!payload.entries.length) {
          const empty = document.createElement('p');
          empty.className = 'card muted';
          empty.textContent = UI.history_empty;
          list.appendChild(empty);
          return;
        }
        payload.entries.forEach((entry) => {
          const card = document.createElement('div');
          card.className = 'card';
          const when = new Date(entry.date);
          const title = document.createElement('div');
          title.className = 'row';
          const topic = document.createElement('strong');
          topic.textContent = entry.topic;
          const badge = document.createElement('span');
          badge.className = entry.is_passing ? 'correct' : 'incorrect';
          badge.textContent = `${entry.percentage}% Score`;
          title.append(topic, badge);
          const meta = document.createElement('div');
          meta.className = 'row muted';
          meta.textContent = `${when.toLocaleDateString()} ${when.toLocaleTimeString()} \\u00b7 ${entry.score}/${entry.total_questions} Correct`;
          card.append(title, meta);
          list.appendChild(card);
        });
      }

      async function navigate(path) {
        try {
          state = await api('POST', path);
          render();
          if (state.view === 'HISTORY') await loadHistory();
        } catch (error) {
          console.error('Navigation failed:', error);
        }
      }

      async function clearHistory() {
        if (!confirm(UI.clear_confirm)) return;
        await api('DELETE', '/history');
        await loadHistory();
      }

      $('generate-form').addEventListener('submit', submitGenerate);
      $('topic-input').addEventListener('input', updateGenerateButton);
      $('topic-input').placeholder = UI.topic_placeholder;
      $('next-button').addEventListener('click', advance);
      $('brand').addEventListener('click', () => navigate('/home'));
      $('history-button').textContent = UI.history;
      $('history-button').addEventListener('click', () => navigate('/history/open'));
      $('back-button').addEventListener('click', () => navigate('/history/back'));
      $('clear-history-button').textContent = UI.clear;
      $('clear-history-button').addEventListener('click', clearHistory);
      $('dashboard-button').textContent = UI.dashboard;
      $('dashboard-button').addEventListener('click', () => navigate('/home'));
      $('retry-button').addEventListener('click', () => navigate('/retry'));
      $('year').textContent = new Date().getFullYear();

      refreshState().then(() => { if (state && state.view === 'HISTORY') loadHistory(); });
    </script>
  </body>
</html>
"""


def _ui_text() -> str:
    return json.dumps(
        {
            "generate": ui_constants.GENERATE_BUTTON,
            "generating": ui_constants.GENERATING_BUTTON,
            "next": ui_constants.NEXT_QUESTION_BUTTON,
            "finish": ui_constants.FINISH_QUIZ_BUTTON,
            "dashboard": ui_constants.BACK_TO_DASHBOARD_BUTTON,
            "new_quiz": ui_constants.NEW_QUIZ_BUTTON_TEMPLATE,
            "history": ui_constants.HISTORY_BUTTON,
            "clear": ui_constants.CLEAR_HISTORY_BUTTON,
            "clear_confirm": ui_constants.CLEAR_HISTORY_CONFIRM,
            "history_empty": ui_constants.HISTORY_EMPTY_MESSAGE,
            "feedback_loading": ui_constants.FEEDBACK_LOADING_MESSAGE,
            "feedback_error": FEEDBACK_ERROR_MESSAGE,
            "topic_placeholder": ui_constants.TOPIC_PLACEHOLDER,
        }
    )


def render_page() -> str:
    """Fill the page template with the stylesheet and UI strings."""
    return (
        _PAGE_TEMPLATE.replace("__STYLES__", Styles.get_page_stylesheet())
        .replace("__UI_TEXT__", _ui_text())
        .replace("__TITLE__", about.APP_NAME)
        .replace("__TAGLINE__", about.APP_TAGLINE)
        .replace("__BUILD__", about.APP_BUILD)
        .replace("__POWERED_BY__", about.APP_POWERED_BY)
    )
