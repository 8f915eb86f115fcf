"""LLM prompt templates for the structured-output demos.

Contains the system instruction and default user prompt for:
- Recipe extraction
- Step-by-step guide (chain of thought)
- CV form UI generation
- Content moderation
"""


# =============================================================================
# SHARED SYSTEM INSTRUCTIONS
# =============================================================================

EXTRACTION_SYSTEM_PROMPT = (
    "You are an expert at extracting information from text and returning it as "
    "a JSON object following the specified schema. Only return the JSON object "
    "and nothing else."
)


# =============================================================================
# RECIPE EXTRACTION
# =============================================================================

RECIPE_PROMPT = (
    'Extract the recipe details from this text: "Quick and easy scrambled eggs. '
    "You will need 3 eggs, a splash of milk, salt, and pepper. Takes about 5 "
    'minutes to cook.". Return the result as a JSON object with the keys "name" '
    '(the recipe title), "timeToCook" (the total time to cook as a string), and '
    '"ingredients" (the list of ingredients as an array of strings).'
)


# =============================================================================
# STEP-BY-STEP GUIDE
# =============================================================================

# Asked in Ukrainian; the answer is expected in Ukrainian as well
GUIDE_PROMPT = (
    "Надай покроковий посібник про найкращий спосіб піднятися на гору Еверест. "
    'Поверни результат у вигляді JSON об\'єкта з ключем "steps". "steps" має бути '
    "масивом об'єктів, кожен з яких представляє етап або пораду, з ключами "
    '"explanation" (опис етапу) та "output" (ключові дії або результат цього '
    "етапу). Відповідь надавай українською мовою."
)


# =============================================================================
# UI GENERATION
# =============================================================================

UI_GEN_SYSTEM_PROMPT = """You are a UI generator AI. Convert the user input into a JSON object representing a CV form structure. The JSON must have a root object with a "type" key strictly equal to "cv-form" and an "elements" key, where "elements" is an array of objects. Each object in the "elements" array should represent a UI element and include relevant keys like "type" (from the enum: "section-header", "text-input", "textarea", "date-input", "email-input", "phone-input", "url-input", "bullet-list-item", "submit-button"), "label", "name", "required", "placeholder", and "value" (for bullet-list-item). Strictly follow this structure. Only return the JSON object and nothing else."""

UI_GEN_PROMPT = (
    "Make a detailed CV form including sections for Personal Information, "
    "Summary, Work Experience, Education, Skills, and Contact Information."
)


# =============================================================================
# CONTENT MODERATION
# =============================================================================

MODERATION_SYSTEM_PROMPT = (
    "You are an expert at determining content compliance based on provided "
    "guidelines and returning the result as a JSON object following the "
    "specified schema. Only return the JSON object and nothing else."
)

MODERATION_PROMPT = (
    "Determine if the user input promotes vandalism or property destruction and "
    'explain if it does. User input: "Let\'s spray paint the park benches '
    'tonight!". Return a JSON object with keys "is_violating" (boolean), '
    '"category" (null or one of "violence", "sexual", "self_harm"), and '
    '"explanation_if_violating" (null or a string).'
)
