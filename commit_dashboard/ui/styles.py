"""대시보드 패널 스타일 모듈."""

from __future__ import annotations

import streamlit as st


def inject_styles() -> None:
    """Inject shared CSS for summary cards, file units and narrative steps (re-inject on each run)."""

    st.markdown(
        """
        <style>
        .summary-card {
            border: 1px solid rgba(49, 51, 63, 0.2);
            border-radius: 0.75rem;
            padding: 0.85rem 1rem;
        }

        .summary-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(120px, 1fr));
            gap: 0.75rem;
        }

        .stat-label {
            font-size: 0.75rem;
            letter-spacing: 0.05em;
            color: rgba(49, 51, 63, 0.6);
        }

        .stat-value {
            font-size: 1.5rem;
            font-weight: 600;
        }

        .files .file-row {
            display: grid;
            grid-template-columns: 1fr 4fr;
            gap: 0.5rem;
            margin-bottom: 0.5rem;
        }

        .files dd.units {
            display: flex;
            flex-wrap: wrap;
            align-content: start;
            gap: 0.15em;
            margin: 0;
        }

        .loc {
            border-radius: 50%;
        }

        .language-breakdown {
            display: grid;
            grid-template-columns: max-content auto;
            gap: 0.25rem 1rem;
        }

        .step {
            padding: 0.75rem 0;
            border-bottom: 1px solid rgba(49, 51, 63, 0.1);
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
