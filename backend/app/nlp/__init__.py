from app.nlp.adapter import AnnotatedWord, AnnotationSource
from app.nlp.english import SpacyAnnotationSource, load_english_annotation_source

__all__ = [
    "AnnotatedWord",
    "AnnotationSource",
    "SpacyAnnotationSource",
    "load_english_annotation_source",
]
