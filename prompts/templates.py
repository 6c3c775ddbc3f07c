"""Prompt templates for medicine package analysis."""

from __future__ import annotations

from string import Template

# --- Shared extraction block ---

_EXTRACTION_SCHEMA = """\
Extract and provide the following in JSON format:
{
  "brandName": "exact brand name from package",
  "genericName": "generic/salt name",
  "manufacturer": "company name",
  "dosageForm": "tablet/capsule/syrup/injection/cream/etc",
  "strength": "dosage strength like 500mg, 10ml",
  "purpose": "2-3 sentences explaining what this medicine treats in simple terms",
  "howToTake": "clear instructions on how to take this medicine, timing, with or without food",
  "sideEffects": ["side effect 1", "side effect 2", "side effect 3"],
  "warnings": ["warning 1", "warning 2"]
}"""

# --- First scan: verify the image shows a medicine, then extract ---

SCAN_PROMPT = Template(
    "You are a helpful pharmacist assistant analyzing a medicine package image.\n"
    "STEP 1: CHECK IF MEDICINE\n"
    "Look at the image. Is there clearly a medication packaging, bottle, blister pack, "
    "or medical text?\n"
    "- If NO (it's a pet, random object, blurry mess, or unreadable): "
    'Return JSON { "error": "NOT_MEDICINE" }\n'
    "- If YES: Proceed to Step 2.\n\n"
    "STEP 2: EXTRACT INFO\n"
    "Extract medicine information and provide a patient-friendly explanation.\n"
    "RESPOND IN: $language language only.\n\n"
    + _EXTRACTION_SCHEMA
    + "\n\nIMPORTANT RULES:\n"
    "1. Use simple, everyday language a non-medical person can understand\n"
    "2. Respond ONLY in $language\n"
    '3. If you cannot read the medicine name clearly, set brandName to "Unable to read"\n'
    "4. Always include common side effects and important warnings"
)

# --- Re-run of an existing scan in another language ---

TRANSLATION_PROMPT = Template(
    "You are a helpful pharmacist assistant analyzing a medicine package image.\n"
    "TASK: Extract medicine information and provide a patient-friendly explanation.\n"
    "RESPOND IN: $language language only.\n\n"
    + _EXTRACTION_SCHEMA
    + "\n\nIMPORTANT RULES:\n"
    "1. Respond ONLY in $language\n"
    "2. Keep the information consistent with the image provided.\n"
    '3. If you cannot read the medicine name clearly, set brandName to "Unable to read"'
)

# --- Supported response languages (code -> English name) ---

LANGUAGES: dict[str, str] = {
    "en": "English",
    "ta": "Tamil",
    "hi": "Hindi",
    "te": "Telugu",
    "kn": "Kannada",
    "ml": "Malayalam",
}

NATIVE_LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "ta": "தமிழ்",
    "hi": "हिंदी",
    "te": "తెలుగు",
    "kn": "ಕನ್ನಡ",
    "ml": "മലയാളം",
}

# --- Interface text per language; English is the fallback for missing keys ---

UI_TEXT: dict[str, dict[str, str]] = {
    "en": {
        "tagline": "Natural Health Companion",
        "tab_scan": "Home",
        "tab_history": "Collection",
        "tab_guide": "Guide",
        "scan_title": "Scan Medicine",
        "capture": "Capture Photo",
        "upload": "Gallery Upload",
        "recent_scans": "Your Collection",
        "analyzing": "Analyzing image...",
        "generic_name": "Active Ingredient",
        "manufacturer": "Maker",
        "purpose": "Purpose",
        "how_to_take": "Usage Instructions",
        "side_effects": "Possible Effects",
        "warnings": "Important Warnings",
        "saved": "Saved to Collection",
        "new_scan": "New Scan",
        "share": "Share Info",
        "translating": "Translating to English...",
        "medical_disclaimer": (
            "This result is generated by AI. It is not a substitute for professional "
            "medical advice. Always consult a doctor."
        ),
        "history_title": "History",
        "history_empty": "Your collection is empty. Start your journey by scanning a medicine.",
        "scanned_on": "Discovered on",
        "preferences": "Preferences",
        "language": "Language",
        "clear_history": "Clear Collection",
        "sidebar_disclaimer": "AI-generated insights. Consult a professional for medical advice.",
        "guide_title": "How it Works",
        "step1": "Snap a Photo",
        "step1_desc": "Ensure good lighting and hold steady.",
        "step2": "AI Analysis",
        "step2_desc": "Our engine identifies the medicine.",
        "step3": "Get Insights",
        "step3_desc": "Read dosage, usage, and warnings in your language.",
        "safety_title": "Safety First",
        "safety_desc": (
            "CocoMed uses advanced AI to read labels, but it does not replace your doctor. "
            "Always double-check with a professional."
        ),
    },
    "ta": {
        "tagline": "இயற்கை மருத்துவ நண்பன்",
        "tab_scan": "முகப்பு",
        "tab_history": "தொகுப்பு",
        "tab_guide": "வழிகாட்டி",
        "scan_title": "மருந்தை ஸ்கேன் செய்",
        "capture": "புகைப்படம் எடு",
        "upload": "கேலரி",
        "recent_scans": "உங்கள் தொகுப்பு",
        "analyzing": "ஆய்வு செய்கிறது...",
        "generic_name": "வேதிப்பெயர்",
        "manufacturer": "தயாரிப்பாளர்",
        "purpose": "பயன்",
        "how_to_take": "பயன்படுத்தும் முறை",
        "side_effects": "பக்க விளைவுகள்",
        "warnings": "எச்சரிக்கைகள்",
        "saved": "சேமிக்கப்பட்டது",
        "new_scan": "புதிய ஸ்கேன்",
        "share": "பகிர்",
        "translating": "தமிழுக்கு மாற்றுகிறது...",
        "medical_disclaimer": "இது AI உருவாக்கிய தகவல். மருத்துவ ஆலோசனைக்கு மருத்துவரை அணுகவும்.",
        "history_title": "வரலாறு",
        "history_empty": "இன்னும் ஸ்கேன்கள் இல்லை.",
        "scanned_on": "தேதி",
        "preferences": "அமைப்புகள்",
        "language": "மொழி",
        "clear_history": "வரலாற்றை அழி",
        "sidebar_disclaimer": "மருத்துவ ஆலோசனைக்கு மருத்துவரை அணுகவும்.",
        "guide_title": "எப்படி இது செயல்படுகிறது",
        "step1": "புகைப்படம் எடுக்கவும்",
        "step1_desc": "நல்ல வெளிச்சம் இருப்பதை உறுதி செய்யவும்.",
        "step2": "AI ஆய்வு",
        "step2_desc": "எங்கள் தொழில்நுட்பம் மருந்தை கண்டறியும்.",
        "step3": "தகவல் பெறுங்கள்",
        "step3_desc": "உங்கள் மொழியில் விவரங்களை படியுங்கள்.",
        "safety_title": "பாதுகாப்பு முக்கியம்",
        "safety_desc": "CocoMed AI தொழில்நுட்பத்தை பயன்படுத்துகிறது. எப்போதும் மருத்துவரிடம் சரிபார்க்கவும்.",
    },
    "hi": {
        "tagline": "प्राकृतिक स्वास्थ्य साथी",
        "tab_scan": "होम",
        "tab_history": "संग्रह",
        "tab_guide": "गाइड",
        "scan_title": "दवा स्कैन करें",
        "capture": "फोटो लें",
        "upload": "गैलरी",
        "recent_scans": "आपका संग्रह",
        "analyzing": "विश्लेषण हो रहा है...",
        "generic_name": "जेनेरिक नाम",
        "manufacturer": "निर्माता",
        "purpose": "उपयोग",
        "how_to_take": "लेने का तरीका",
        "side_effects": "दुष्प्रभाव",
        "warnings": "चेतावनी",
        "saved": "सहेज लिया गया",
        "new_scan": "नया स्कैन",
        "share": "साझा करें",
        "translating": "हिंदी में अनुवाद हो रहा है...",
        "medical_disclaimer": "यह जानकारी AI द्वारा दी गई है। डॉक्टर की सलाह का विकल्प नहीं है।",
        "history_title": "इतिहास",
        "history_empty": "कोई स्कैन नहीं।",
        "scanned_on": "तारीख",
        "preferences": "सेटिंग्स",
        "language": "भाषा",
        "clear_history": "इतिहास साफ़ करें",
        "sidebar_disclaimer": "चिकित्सा सलाह के लिए डॉक्टर से मिलें।",
        "guide_title": "यह कैसे काम करता है",
        "step1": "फोटो लें",
        "step1_desc": "अच्छी रोशनी सुनिश्चित करें।",
        "step2": "AI विश्लेषण",
        "step2_desc": "हमारा इंजन दवा की पहचान करता है।",
        "step3": "जानकारी प्राप्त करें",
        "step3_desc": "अपनी भाषा में विवरण पढ़ें।",
        "safety_title": "सुरक्षा पहले",
        "safety_desc": "CocoMed AI का उपयोग करता है। हमेशा डॉक्टर से सलाह लें।",
    },
    "te": {
        "tagline": "మీ ఆరోగ్య మిత్రుడు",
        "tab_scan": "హోమ్",
        "tab_history": "చరిత్ర",
        "tab_guide": "గైడ్",
        "scan_title": "మందును స్కాన్ చేయండి",
        "capture": "ఫోటో తీయండి",
        "upload": "గ్యాలరీ",
        "recent_scans": "మీ సేకరణ",
        "analyzing": "విశ్లేషిస్తోంది...",
        "generic_name": "సాధారణ పేరు",
        "manufacturer": "తయారీదారు",
        "purpose": "ఉపయోగం",
        "how_to_take": "వాడే విధానం",
        "side_effects": "దుష్ప్రభావాలు",
        "warnings": "హెచ్చరికలు",
        "saved": "సేవ్ చేయబడింది",
        "new_scan": "కొత్త స్కాన్",
        "share": "షేర్ చేయండి",
        "translating": "తెలుగులోకి అనువదిస్తోంది...",
        "medical_disclaimer": "ఇది AI రూపొందించిన సమాచారం. వైద్య సలహా కోసం డాక్టర్‌ను సంప్రదించండి.",
        "history_title": "చరిత్ర",
        "history_empty": "స్కాన్‌లు లేవు.",
        "scanned_on": "తేదీ",
        "preferences": "సెట్టింగ్‌లు",
        "language": "భాష",
        "clear_history": "చరిత్రను క్లియర్ చేయండి",
        "sidebar_disclaimer": "వైద్య సలహా కోసం డాక్టర్‌ను సంప్రదించండి.",
        "guide_title": "ఇది ఎలా పనిచేస్తుంది",
        "step1": "ఫోటో తీయండి",
        "step1_desc": "మంచి లైటింగ్ ఉండేలా చూసుకోండి.",
        "step2": "AI విశ్లేషణ",
        "step2_desc": "మా ఇంజిన్ మందును గుర్తిస్తుంది.",
        "step3": "సమాచారం పొందండి",
        "step3_desc": "మీ భాషలో వివరాలను చదవండి.",
        "safety_title": "భద్రత ముఖ్యం",
        "safety_desc": "CocoMed AIని ఉపయోగిస్తుంది. ఎల్లప్పుడూ నిపుణుడిని సంప్రదించండి.",
    },
    "kn": {
        "tagline": "ನಿಮ್ಮ ಆರೋಗ್ಯ ಸಂಗಾತಿ",
        "tab_scan": "ಮುಖಪುಟ",
        "tab_history": "ಇತಿಹಾಸ",
        "tab_guide": "ಮಾರ್ಗದರ್ಶಿ",
        "scan_title": "ಔಷಧಿಯನ್ನು ಸ್ಕ್ಯಾನ್ ಮಾಡಿ",
        "capture": "ಫೋಟೋ ತೆಗೆಯಿರಿ",
        "upload": "ಗ್ಯಾಲರಿ",
        "recent_scans": "ನಿಮ್ಮ ಸಂಗ್ರಹ",
        "analyzing": "ವಿಶ್ಲೇಷಿಸಲಾಗುತ್ತಿದೆ...",
        "generic_name": "ಸಾಮಾನ್ಯ ಹೆಸರು",
        "manufacturer": "ತಯಾರಕರು",
        "purpose": "ಉಪಯೋಗ",
        "how_to_take": "ತೆಗೆದುಕೊಳ್ಳುವ ವಿಧಾನ",
        "side_effects": "ಅಡ್ಡ ಪರಿಣಾಮಗಳು",
        "warnings": "ಎಚ್ಚರಿಕೆಗಳು",
        "saved": "ಉಳಿಸಲಾಗಿದೆ",
        "new_scan": "ಹೊಸ ಸ್ಕ್ಯಾನ್",
        "share": "ಹಂಚಿಕೊಳ್ಳಿ",
        "translating": "ಕನ್ನಡಕ್ಕೆ ಅನುವಾದಿಸಲಾಗುತ್ತಿದೆ...",
        "medical_disclaimer": "ಇದು AI ನಿಂದ ರಚಿತವಾಗಿದೆ. ವೈದ್ಯಕೀಯ ಸಲಹೆಗಾಗಿ ವೈದ್ಯರನ್ನು ಸಂಪರ್ಕಿಸಿ.",
        "history_title": "ಇತಿಹಾಸ",
        "history_empty": "ಯಾವುದೇ ಸ್ಕ್ಯಾನ್‌ಗಳಿಲ್ಲ.",
        "scanned_on": "ದಿನಾಂಕ",
        "preferences": "ಸೆಟ್ಟಿಂಗ್‌ಗಳು",
        "language": "ಭಾಷೆ",
        "clear_history": "ಇತಿಹಾಸವನ್ನು ಅಳಿಸಿ",
        "sidebar_disclaimer": "ವೈದ್ಯಕೀಯ ಸಲಹೆಗಾಗಿ ವೈದ್ಯರನ್ನು ಸಂಪರ್ಕಿಸಿ.",
        "guide_title": "ಇದು ಹೇಗೆ ಕೆಲಸ ಮಾಡುತ್ತದೆ",
        "step1": "ಫೋಟೋ ತೆಗೆಯಿರಿ",
        "step1_desc": "ಒಳ್ಳೆಯ ಬೆಳಕು ಇದೆಯೇ ಎಂದು ಖಚಿತಪಡಿಸಿಕೊಳ್ಳಿ.",
        "step2": "AI ವಿಶ್ಲೇಷಣೆ",
        "step2_desc": "ನಮ್ಮ ಎಂಜಿನ್ ಔಷಧಿಯನ್ನು ಗುರುತಿಸುತ್ತದೆ.",
        "step3": "ಮಾಹಿತಿ ಪಡೆಯಿರಿ",
        "step3_desc": "ನಿಮ್ಮ ಭಾಷೆಯಲ್ಲಿ ವಿವರಗಳನ್ನು ಓದಿ.",
        "safety_title": "ಸುರಕ್ಷತೆ ಮೊದಲು",
        "safety_desc": "CocoMed AI ಅನ್ನು ಬಳಸುತ್ತದೆ. ಯಾವಾಗಲೂ ವೈದ್ಯರನ್ನು ಸಂಪರ್ಕಿಸಿ.",
    },
    "ml": {
        "tagline": "നിങ്ങളുടെ ആരോഗ്യ സുഹൃത്ത്",
        "tab_scan": "ഹോം",
        "tab_history": "ചരിത്രം",
        "tab_guide": "ഗൈഡ്",
        "scan_title": "മരുന്ന് സ്കാൻ ചെയ്യുക",
        "capture": "ഫോട്ടോ എടുക്കുക",
        "upload": "ഗാലറി",
        "recent_scans": "നിങ്ങളുടെ ശേഖരം",
        "analyzing": "വിശകലനം ചെയ്യുന്നു...",
        "generic_name": "ജനറിക് പേര്",
        "manufacturer": "നിർമ്മാതാവ്",
        "purpose": "ഉപയോഗം",
        "how_to_take": "കഴിക്കേണ്ട വിധം",
        "side_effects": "പാർശ്വഫലങ്ങൾ",
        "warnings": "മുന്നറിയിപ്പുകൾ",
        "saved": "സേവ് ചെയ്തു",
        "new_scan": "പുതിയ സ്കാൻ",
        "share": "പങ്ക് വെക്കുക",
        "translating": "മലയാളത്തിലേക്ക് വിവർത്തനം ചെയ്യുന്നു...",
        "medical_disclaimer": "ഇത് AI നൽകുന്ന വിവരങ്ങളാണ്. വൈദ്യോപദേശത്തിന് ഡോക്ടറെ സമീപിക്കുക.",
        "history_title": "ചരിത്രം",
        "history_empty": "സ്കാനുകൾ ഒന്നുമില്ല.",
        "scanned_on": "തീയതി",
        "preferences": "ക്രമീകരണങ്ങൾ",
        "language": "ഭാഷ",
        "clear_history": "ചരിത്രം മായ്ക്കുക",
        "sidebar_disclaimer": "വൈദ്യോപദേശത്തിന് ഡോക്ടറെ സമീപിക്കുക.",
        "guide_title": "ഇതെങ്ങനെ പ്രവർത്തിക്കുന്നു",
        "step1": "ഫോട്ടോ എടുക്കുക",
        "step1_desc": "നല്ല വെളിച്ചം ഉറപ്പാക്കുക.",
        "step2": "AI വിശകലനം",
        "step2_desc": "ഞങ്ങളുടെ എഞ്ചിൻ മരുന്ന് തിരിച്ചറിയുന്നു.",
        "step3": "വിവരങ്ങൾ നേടുക",
        "step3_desc": "നിങ്ങളുടെ ഭാഷയിൽ വിവരങ്ങൾ വായിക്കുക.",
        "safety_title": "സുരക്ഷ പ്രധാനം",
        "safety_desc": "CocoMed AI ഉപയോഗിക്കുന്നു. എല്ലായ്പ്പോഴും ഒരു ഡോക്ടറുടെ ഉപദേശം തേടുക.",
    },
}


# Map of named templates
TEMPLATES: dict[str, Template] = {
    "scan": SCAN_PROMPT,
    "translate": TRANSLATION_PROMPT,
}
