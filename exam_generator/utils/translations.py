# exam_generator/utils/translations.py
from exam_generator.models.enums import Language

TRANSLATIONS = {
    Language.EN: {
        "title": "Exam Question Generator",
        "subject": "Subject",
        "subject_placeholder": "Enter subject name",
        "topics": "Topics",
        "topics_placeholder": "Enter topics separated by commas",
        "difficulty": "Difficulty",
        "easy": "Easy",
        "medium": "Medium",
        "hard": "Hard",
        "question_types": "Question Types",
        "open_ended": "Open-ended",
        "multiple_choice": "Multiple Choice",
        "true_false": "True/False",
        "generate": "Generate Questions",
        "loading": "Generating...",
        "questions": "Generated Questions",
        "answer": "Answer",
        "regenerate": "Regenerate",
        "error": "An error occurred while generating questions. Please try again.",
        "subject_required": "Please enter a subject.",
        "topics_required": "Please enter at least one topic.",
        "questions_required": "Please request at least one question.",
        "save_questions": "Save Questions",
        "save_answer_key": "Save Answer Key",
        "true": "True",
        "false": "False",
        "subject_label": "Subject",
        "answer_key": "Answer Key",
        "questions_file_name": "questions",
        "answer_key_file_name": "answer-key",
    },
    Language.TR: {
        "title": "Sınav Sorusu Oluşturucu",
        "subject": "Ders",
        "subject_placeholder": "Konu adını girin",
        "topics": "Konular",
        "topics_placeholder": "Konuları virgülle ayırarak girin",
        "difficulty": "Zorluk",
        "easy": "Kolay",
        "medium": "Orta",
        "hard": "Zor",
        "question_types": "Soru Türleri",
        "open_ended": "Açık Uçlu",
        "multiple_choice": "Çoktan Seçmeli",
        "true_false": "Doğru/Yanlış",
        "generate": "Soruları Oluştur",
        "loading": "Oluşturuluyor...",
        "questions": "Oluşturulan Sorular",
        "answer": "Cevap",
        "regenerate": "Yeniden Oluştur",
        "error": "Sorular oluşturulurken bir hata oluştu. Lütfen tekrar deneyin.",
        "subject_required": "Lütfen bir ders girin.",
        "topics_required": "Lütfen en az bir konu girin.",
        "questions_required": "Lütfen en az bir soru isteyin.",
        "save_questions": "Soruları Kaydet",
        "save_answer_key": "Cevap Anahtarını Kaydet",
        "true": "Doğru",
        "false": "Yanlış",
        "subject_label": "Ders",
        "answer_key": "Cevap Anahtarı",
        "questions_file_name": "sorular",
        "answer_key_file_name": "cevap-anahtari",
    },
}

# True/false answer literals the model must use for each language.
TRUE_FALSE_LITERALS = {
    Language.EN: ("True", "False"),
    Language.TR: ("Doğru", "Yanlış"),
}


def t(language: Language | str, key: str) -> str:
    """Looks up a UI string, falling back to English for unknown languages or keys."""
    try:
        lang = Language(language)
    except ValueError:
        lang = Language.EN
    return TRANSLATIONS[lang].get(key) or TRANSLATIONS[Language.EN][key]
