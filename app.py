"""
Language Guesser
Type a sentence and see how likely each language is.
"""

import pandas as pd
import streamlit as st

from language_guesser import (
    LanguageGuesserError,
    NaiveBayesClassifier,
    Settings,
    load_or_train,
    rank_probabilities,
)

# Page configuration
st.set_page_config(
    page_title="Language Guesser",
    page_icon="🌐",
    layout="centered",
)

# Custom CSS
st.markdown(
    """
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        color: #1E3A5F;
        margin-bottom: 0.5rem;
        text-align: center;
    }
    .sub-header {
        font-size: 1.1rem;
        color: #666;
        margin-bottom: 2rem;
        text-align: center;
    }
</style>
""",
    unsafe_allow_html=True,
)

HIGHLIGHT_COLOR = "#dc3545"
BAR_COLOR = "#1f4e9c"


@st.cache_resource(show_spinner=False)
def get_classifier(model_path: str, corpus_dir: str, extension: str) -> NaiveBayesClassifier:
    """Load the model once per server process, training it first if needed."""
    return load_or_train(model_path, corpus_dir, extension=extension)


def init_session_state():
    """Initialize session state variables."""
    if "result" not in st.session_state:
        st.session_state.result = None
    if "query" not in st.session_state:
        st.session_state.query = ""


def render_sidebar(settings: Settings, classifier: NaiveBayesClassifier):
    """Render the sidebar with model information."""
    with st.sidebar:
        st.markdown("### 🧠 Model")
        model = classifier.model
        st.markdown(f"**File:** `{settings.model_path}`")
        st.markdown(f"**Languages:** {len(model.class_counts)}")
        st.markdown(f"**Training examples:** {model.num_examples:,}")
        st.markdown(f"**Vocabulary:** {len(model.vocabulary):,} words")

        st.markdown("---")
        st.markdown("### 🔤 How it works")
        st.markdown("""
        Words are lowercased and stripped of digits, punctuation and
        accented letters, then scored against per-language word counts
        with a Naive Bayes model.
        """)


def build_frame(result) -> pd.DataFrame:
    """Probability per language, with the winning bar coloured red."""
    frame = pd.DataFrame([row.to_dict() for row in rank_probabilities(result)])
    frame["color"] = [HIGHLIGHT_COLOR if top else BAR_COLOR for top in frame["is_top"]]
    return frame


def render_result(result):
    """Render the verdict and the probability chart."""
    top = next(row for row in rank_probabilities(result) if row.is_top)
    st.markdown(f"### Detected language: **{top.name}** ({top.probability:.1%})")
    st.markdown("#### Language Probability")
    st.bar_chart(build_frame(result), x="name", y="probability", color="color")


def main():
    """Main application entry point."""
    init_session_state()

    st.markdown('<p class="main-header">🌐 Language Guesser</p>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Introduce a text and press the button to detect the language.</p>',
        unsafe_allow_html=True,
    )

    try:
        settings = Settings.from_env()
    except ValueError as e:
        st.error(f"❌ Invalid configuration: {e}")
        st.stop()

    try:
        with st.spinner("Loading model..."):
            classifier = get_classifier(
                str(settings.model_path), str(settings.corpus_dir), settings.corpus_extension
            )
    except LanguageGuesserError as e:
        st.error(f"❌ Could not load or train the model: {e}")
        st.stop()

    render_sidebar(settings, classifier)

    query = st.text_input("Input text", value=st.session_state.query)
    if st.button("🔍 Detect Language", type="primary", use_container_width=True):
        st.session_state.query = query
        st.session_state.result = classifier.classify(query)

    if st.session_state.result is not None:
        st.markdown("---")
        render_result(st.session_state.result)


if __name__ == "__main__":
    main()
