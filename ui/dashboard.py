# ui/dashboard.py
import os

import pandas as pd
import requests
import streamlit as st

# -------------------- CONFIG --------------------
API_URL = os.getenv("API_URL", "http://localhost:8000")
SHORTLIST_THRESHOLD = int(os.getenv("SHORTLIST_THRESHOLD", "70"))

st.set_page_config(page_title="TalentTrace", page_icon="🧠", layout="wide")
st.title("TalentTrace Resume Screener")

st.markdown(
    "Upload candidate resumes (PDF), score them against a job description, "
    "and review the shortlist."
)

if "api_url" not in st.session_state:
    st.session_state.api_url = API_URL


def _api(method: str, path: str, **kwargs):
    """Call the API; show the server's short message on failure and return None."""
    try:
        r = requests.request(method, f"{st.session_state.api_url}{path}", timeout=90, **kwargs)
    except requests.exceptions.RequestException as e:
        st.error(f"❌ Connection error: {e}")
        return None
    if not r.ok:
        try:
            detail = r.json().get("detail", r.text)
        except ValueError:
            detail = r.text
        st.error(f"❌ {detail}")
        return None
    return r.json()


def _table(rows):
    df = pd.DataFrame(
        [
            {
                "Name": r.get("candidate_name") or "—",
                "Email": r.get("email") or "—",
                "Phone": r.get("phone") or "—",
                "Skills": ", ".join((r.get("skills") or [])[:5]),
                "Score": r.get("match_score"),
                "Role": r.get("role_applied") or "",
            }
            for r in rows
        ]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)


tab1, tab2, tab3 = st.tabs(["📤 Upload Resume", "🎯 Score Candidate", "📊 Candidates"])

# ==================== TAB 1: Upload Resume ====================
with tab1:
    st.subheader("Upload Candidate Resume")
    with st.form("upload_form", clear_on_submit=True):
        resume_file = st.file_uploader("Upload Resume (PDF)", type=["pdf"])
        submitted = st.form_submit_button("Upload & Parse Resume")

    if submitted:
        if not resume_file:
            st.warning("Please upload a resume first.")
        else:
            files = {"resume": (resume_file.name, resume_file, resume_file.type or "application/pdf")}
            with st.spinner("⏳ Uploading and parsing resume..."):
                cand = _api("POST", "/api/upload-resume", files=files)
            if cand:
                st.success(f"✅ Uploaded. ID: {cand['id']}")
                st.markdown(f"**Name:** {cand.get('candidate_name') or '—'}")
                st.markdown(f"**Email:** {cand.get('email') or '—'}")
                st.markdown(f"**Phone:** {cand.get('phone') or '—'}")
                st.markdown(f"**Skills:** {', '.join(cand.get('skills') or []) or '—'}")

# ==================== TAB 2: Score Candidate ====================
with tab2:
    st.subheader("Score a Candidate Against a Job Description")
    candidates = _api("GET", "/api/resumes") or []
    if not candidates:
        st.info("No resumes uploaded yet.")
    else:
        labels = {
            f"{c.get('candidate_name') or 'Unnamed'} ({c['match_score'] if c.get('match_score') is not None else '—'}) · {c['file_name']}": c["id"]
            for c in candidates
        }
        choice = st.selectbox("Candidate", list(labels))
        jd_text = st.text_area("Job Description", height=220)
        if st.button("Score Resume"):
            if not jd_text.strip():
                st.warning("Enter a job description.")
            else:
                with st.spinner("Scoring..."):
                    res = _api("POST", "/api/score-resume", json={"resumeId": labels[choice], "jobDescription": jd_text})
                if res:
                    st.metric("Match Score", f"{res['match_score']}/100")
                    st.caption(f"Source: {res['source']}")
                    st.markdown(res["justification"].replace("\n", "  \n"))

# ==================== TAB 3: Candidates ====================
with tab3:
    if st.button("🔄 Refresh"):
        st.rerun()

    all_rows = _api("GET", "/api/resumes") or []
    shortlisted = _api("GET", "/api/shortlisted", params={"threshold": SHORTLIST_THRESHOLD}) or []

    st.markdown(f"### Shortlisted (score ≥ {SHORTLIST_THRESHOLD}) — {len(shortlisted)}")
    if shortlisted:
        _table(shortlisted)

    st.markdown(f"### All Resumes — {len(all_rows)}")
    if all_rows:
        _table(all_rows)
        to_delete = st.selectbox(
            "Delete a resume",
            [""] + [r["id"] for r in all_rows],
            format_func=lambda i: "" if not i else next(
                f"{r.get('candidate_name') or 'Unnamed'} · {r['file_name']}" for r in all_rows if r["id"] == i
            ),
        )
        if to_delete and st.button("🗑️ Delete", type="secondary"):
            if _api("DELETE", f"/api/resumes/{to_delete}"):
                st.success("Deleted.")
                st.rerun()
