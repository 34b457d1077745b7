"""Custom CSS styling for the Learning Coach Gradio UI"""

custom_css = """
/* ============================================
   ONTOP LEARNING COACH THEME
   ============================================ */

:root {
    --bg-primary: #23174B;
    --bg-panel: #3a2356;
    --bg-output: #6D2F5A;
    --border-color: #6D2F5A;
    --border-accent: #DE485D;
    --text-primary: #FFDEE2;
    --text-secondary: #FFBDC6;
    --accent: #FF5A70;
    --accent-soft: #FF8C9C;
    --radius-md: 12px;
}

.gradio-container {
    max-width: 960px !important;
    margin: 0 auto !important;
    background: var(--bg-primary) !important;
    color: var(--text-primary) !important;
}

footer { visibility: hidden !important; }

h1, h2, h3, h4 { color: white !important; font-weight: 700 !important; }
p, span, label, li { color: var(--text-primary) !important; }

/* HEADER */
#coach-header { text-align: center !important; margin-bottom: 24px !important; }
#coach-header h1 {
    font-size: 44px !important;
    background: linear-gradient(90deg, var(--accent-soft), var(--accent)) !important;
    -webkit-background-clip: text !important;
    -webkit-text-fill-color: transparent !important;
}
#coach-header p { color: var(--text-secondary) !important; }

/* FORM */
#profile-form {
    background: var(--bg-panel) !important;
    border: 1px solid var(--border-color) !important;
    border-radius: var(--radius-md) !important;
    padding: 24px !important;
}

textarea, input[type="text"], input[type="email"] {
    background: var(--bg-primary) !important;
    border: 1px solid var(--border-color) !important;
    color: var(--text-primary) !important;
}

textarea:focus, input:focus {
    border-color: var(--accent) !important;
    box-shadow: 0 0 0 2px rgba(255, 90, 112, 0.35) !important;
}

/* BUTTONS */
.primary {
    background: linear-gradient(90deg, var(--border-accent), var(--accent)) !important;
    color: white !important;
    font-weight: 700 !important;
}
.primary:hover { background: linear-gradient(90deg, var(--accent), var(--border-accent)) !important; }
button:disabled { opacity: 0.5 !important; cursor: not-allowed !important; }

/* OUTPUT */
#learning-drop-output {
    background: var(--bg-output) !important;
    border: 1px solid var(--border-accent) !important;
    border-radius: var(--radius-md) !important;
    padding: 24px !important;
}
#learning-drop-output h3 { color: var(--accent-soft) !important; }
#learning-drop-output a { color: white !important; font-weight: 700 !important; }
#learning-drop-output strong { color: var(--accent-soft) !important; }

#sources-display {
    border-top: 1px solid rgba(222, 72, 93, 0.5) !important;
    padding-top: 12px !important;
    font-size: 13px !important;
}
#sources-display a { color: var(--text-primary) !important; }

#error-display {
    background: rgba(222, 72, 93, 0.5) !important;
    border: 1px solid var(--border-accent) !important;
    border-radius: var(--radius-md) !important;
    padding: 16px !important;
}
"""
