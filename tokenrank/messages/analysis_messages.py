# tokenrank/messages/analysis_messages.py

# ✅ Positive
ANALYSIS_SUCCESS = "Frequency analysis completed successfully."
REPORT_WRITTEN = "Frequency report written."

# ❌ Errors
INVALID_TOP = "--top must be zero or a positive number."
INPUT_NOT_READABLE = "The input file could not be read."
INPUT_NOT_TEXT = "The input file is not valid UTF-8 text."
OUTPUT_NOT_WRITABLE = "The report destination could not be written."
PLOT_NOT_WRITABLE = "The plot file could not be written."
STOPWORD_SOURCE_MISSING = (
    "NLTK stopword corpus not found. Run: python -m nltk.downloader stopwords"
)
