# streamlit_app/app.py
import streamlit as st
import sys
import os

# Add project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from exam_generator.models.enums import Difficulty, Language, QuestionType
from exam_generator.models.question import Question
from exam_generator.services.exporter import (
    answer_key_file_name,
    build_answer_key_document,
    build_questions_document,
    option_label,
    questions_file_name,
)
from exam_generator.utils.translations import t
from streamlit_app.form_state import ExamForm

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# --- Page Config ---
st.set_page_config(page_title="Exam Question Generator")

# --- Session State ---
if "exam_form" not in st.session_state:
    st.session_state.exam_form = ExamForm()
form: ExamForm = st.session_state.exam_form

# --- Header & Language ---
title_col, lang_col = st.columns([3, 1])
with lang_col:
    form.language = st.selectbox(
        "Language",
        options=list(Language),
        format_func=lambda lang: "🇺🇸 English" if lang == Language.EN else "🇹🇷 Türkçe",
        index=list(Language).index(Language(form.language)),
        label_visibility="collapsed",
    )
lang = form.language
with title_col:
    st.title(t(lang, "title"))

# --- Form ---
form.subject = st.text_input(t(lang, "subject"), value=form.subject, placeholder=t(lang, "subject_placeholder"))

topics_text = st.text_area(
    t(lang, "topics"),
    value=form.topics_text,
    placeholder=t(lang, "topics_placeholder"),
    height=80,
)
form.set_topics_from_text(topics_text)

form.difficulty = st.selectbox(
    t(lang, "difficulty"),
    options=list(Difficulty),
    format_func=lambda d: t(lang, d.value),
    index=list(Difficulty).index(Difficulty(form.difficulty)),
)

st.markdown(f"**{t(lang, 'question_types')}**")
count_labels = {
    QuestionType.OPEN_ENDED: "open_ended",
    QuestionType.MULTIPLE_CHOICE: "multiple_choice",
    QuestionType.TRUE_FALSE: "true_false",
}
for col, (question_type, label_key) in zip(st.columns(3), count_labels.items()):
    with col:
        form.question_counts[question_type.value] = int(st.number_input(
            t(lang, label_key),
            min_value=0,
            step=1,
            value=form.question_counts[question_type.value],
            key=f"count_{question_type.value}",
        ))

if st.button(t(lang, "loading") if form.loading else t(lang, "generate"), disabled=form.loading, type="primary", use_container_width=True):
    with st.spinner(t(lang, "loading")):
        form.submit()

if form.error:
    st.error(form.error)

# --- Results ---
if form.questions:
    st.divider()
    header_col, questions_col, key_col = st.columns([2, 1, 1])
    with header_col:
        st.subheader(t(lang, "questions"))
    with questions_col:
        st.download_button(
            t(lang, "save_questions"),
            data=build_questions_document(form.subject, form.questions, lang),
            file_name=questions_file_name(form.subject, lang),
            mime=DOCX_MIME,
        )
    with key_col:
        st.download_button(
            t(lang, "save_answer_key"),
            data=build_answer_key_document(form.questions, lang),
            file_name=answer_key_file_name(form.subject, lang),
            mime=DOCX_MIME,
        )

    for index, record in enumerate(form.questions):
        q = Question.from_record(record)
        with st.container(border=True):
            text_col, action_col = st.columns([5, 1])
            with text_col:
                st.markdown(f"**{index + 1}.** {q.question}")
                if q.options:
                    for i, option in enumerate(q.options):
                        st.markdown(f"&nbsp;&nbsp;&nbsp;**{option_label(i)}.** {option}")
                if q.type == QuestionType.TRUE_FALSE.value:
                    st.markdown(f"&nbsp;&nbsp;&nbsp;**A.** {t(lang, 'true')}")
                    st.markdown(f"&nbsp;&nbsp;&nbsp;**B.** {t(lang, 'false')}")
                st.info(f"**{t(lang, 'answer')}:** {q.answer}")
            with action_col:
                if st.button(t(lang, "regenerate"), key=f"regenerate_{index}", disabled=form.loading):
                    with st.spinner(t(lang, "loading")):
                        form.regenerate_at(index)
                    st.rerun()
