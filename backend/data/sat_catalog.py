"""
SAT Topic Catalog Data
Used to seed the database with the topic roadmap and assessment questions
"""

SAT_TOPICS = [
    # Math
    {"section": "math", "name": "Linear Equations", "description": "Solving one and two-variable linear equations", "order": 1, "score_impact": 25, "test_frequency": 8},
    {"section": "math", "name": "Quadratic Functions", "description": "Understanding parabolas and quadratic expressions", "order": 2, "score_impact": 20, "test_frequency": 6},
    {"section": "math", "name": "Systems of Equations", "description": "Solving systems using substitution and elimination", "order": 3, "score_impact": 18, "test_frequency": 5},
    {"section": "math", "name": "Polynomials", "description": "Operations with polynomial expressions", "order": 4, "score_impact": 15, "test_frequency": 4},
    {"section": "math", "name": "Ratios & Percentages", "description": "Working with proportional relationships", "order": 5, "score_impact": 15, "test_frequency": 7},
    {"section": "math", "name": "Geometry Basics", "description": "Area, perimeter, and basic geometric properties", "order": 6, "score_impact": 12, "test_frequency": 5},
    {"section": "math", "name": "Trigonometry", "description": "Basic trigonometric functions and relationships", "order": 7, "score_impact": 10, "test_frequency": 3},
    {"section": "math", "name": "Data Analysis", "description": "Statistics, probability, and data interpretation", "order": 8, "score_impact": 18, "test_frequency": 6},
    # Reading
    {"section": "reading", "name": "Main Idea", "description": "Identifying central themes in passages", "order": 1, "score_impact": 20, "test_frequency": 10},
    {"section": "reading", "name": "Supporting Details", "description": "Finding evidence and supporting information", "order": 2, "score_impact": 15, "test_frequency": 8},
    {"section": "reading", "name": "Inference", "description": "Drawing conclusions from text", "order": 3, "score_impact": 18, "test_frequency": 7},
    {"section": "reading", "name": "Vocabulary in Context", "description": "Understanding word meanings from context", "order": 4, "score_impact": 12, "test_frequency": 6},
    {"section": "reading", "name": "Author's Purpose", "description": "Understanding why authors write what they write", "order": 5, "score_impact": 15, "test_frequency": 5},
    {"section": "reading", "name": "Text Structure", "description": "Analyzing how texts are organized", "order": 6, "score_impact": 10, "test_frequency": 4},
    # Writing
    {"section": "writing", "name": "Subject-Verb Agreement", "description": "Matching subjects with correct verb forms", "order": 1, "score_impact": 18, "test_frequency": 8},
    {"section": "writing", "name": "Comma Usage", "description": "Using commas correctly in various contexts", "order": 2, "score_impact": 15, "test_frequency": 9},
    {"section": "writing", "name": "Pronoun Agreement", "description": "Matching pronouns with their antecedents", "order": 3, "score_impact": 12, "test_frequency": 6},
    {"section": "writing", "name": "Sentence Structure", "description": "Creating clear and effective sentences", "order": 4, "score_impact": 15, "test_frequency": 7},
    {"section": "writing", "name": "Conciseness", "description": "Eliminating wordiness and redundancy", "order": 5, "score_impact": 10, "test_frequency": 5},
    {"section": "writing", "name": "Transitions", "description": "Connecting ideas smoothly between sentences", "order": 6, "score_impact": 12, "test_frequency": 6},
]

QUESTION_SETS = {
    "Linear Equations": [
        {
            "question_text": "Solve for x: 2x + 5 = 13",
            "options": ["x = 4", "x = 9", "x = 3", "x = 6"],
            "correct_answer": "x = 4",
            "explanation": "Subtract 5 from both sides to get 2x = 8, then divide by 2 to get x = 4.",
            "difficulty": 1,
        },
        {
            "question_text": "If 3(x - 2) = 15, what is the value of x?",
            "options": ["x = 5", "x = 7", "x = 3", "x = 11"],
            "correct_answer": "x = 7",
            "explanation": "Divide both sides by 3 to get x - 2 = 5, then add 2 to get x = 7.",
            "difficulty": 2,
        },
        {
            "question_text": "Solve for y: 4y - 8 = 2y + 6",
            "options": ["y = 7", "y = 1", "y = -7", "y = 14"],
            "correct_answer": "y = 7",
            "explanation": "Subtract 2y from both sides to get 2y - 8 = 6, add 8 to get 2y = 14, divide by 2.",
            "difficulty": 2,
        },
        {
            "question_text": "A rectangle has a perimeter of 36 units. If the length is 4 more than twice the width, what is the width?",
            "options": ["4 units", "6 units", "14/3 units", "5 units"],
            "correct_answer": "14/3 units",
            "explanation": "Let w = width. Length = 2w + 4. Perimeter = 2w + 2(2w + 4) = 36. Solving: 6w + 8 = 36, w = 14/3.",
            "difficulty": 3,
            "is_capstone": True,
        },
    ],
    "Quadratic Functions": [
        {
            "question_text": "What is the vertex form of a quadratic function?",
            "options": ["y = a(x - h)² + k", "y = ax² + bx + c", "y = a(x - r)(x - s)", "y = mx + b"],
            "correct_answer": "y = a(x - h)² + k",
            "explanation": "Vertex form shows the vertex (h, k) directly and makes it easy to identify transformations.",
            "difficulty": 1,
        },
        {
            "question_text": "If f(x) = x² - 6x + 8, what are the zeros of the function?",
            "options": ["x = 2 and x = 4", "x = -2 and x = -4", "x = 1 and x = 8", "x = 3 and x = 5"],
            "correct_answer": "x = 2 and x = 4",
            "explanation": "Factor: (x - 2)(x - 4) = 0, so x = 2 or x = 4.",
            "difficulty": 2,
        },
        {
            "question_text": "A ball is thrown upward with height h(t) = -16t² + 64t + 5. What is the maximum height?",
            "options": ["69 feet", "64 feet", "5 feet", "80 feet"],
            "correct_answer": "69 feet",
            "explanation": "Maximum occurs at t = -b/(2a) = -64/(-32) = 2. h(2) = -16(4) + 64(2) + 5 = 69.",
            "difficulty": 3,
            "is_capstone": True,
        },
    ],
    "Ratios & Percentages": [
        {
            "question_text": "If 15% of a number is 45, what is the number?",
            "options": ["300", "200", "450", "30"],
            "correct_answer": "300",
            "explanation": "0.15 × n = 45, so n = 45 ÷ 0.15 = 300.",
            "difficulty": 1,
        },
        {
            "question_text": "A shirt originally costs $40. After a 25% discount, what is the sale price?",
            "options": ["$30", "$35", "$10", "$32"],
            "correct_answer": "$30",
            "explanation": "25% of $40 = $10. Sale price = $40 - $10 = $30.",
            "difficulty": 1,
        },
        {
            "question_text": "If a population grows from 1000 to 1200, what is the percent increase?",
            "options": ["20%", "12%", "200%", "25%"],
            "correct_answer": "20%",
            "explanation": "Change = 200. Percent = (200/1000) × 100 = 20%.",
            "difficulty": 2,
        },
        {
            "question_text": "A store marks up prices by 40%, then offers a 20% discount. What is the net effect on the original price?",
            "options": ["12% increase", "20% increase", "20% decrease", "No change"],
            "correct_answer": "12% increase",
            "explanation": "Start with 100. After 40% markup: 140. After 20% discount: 140 × 0.8 = 112. Net = 12% increase.",
            "difficulty": 3,
            "is_capstone": True,
        },
    ],
    "Main Idea": [
        {
            "question_text": "The main idea of a passage is typically found in:",
            "options": ["The first or last paragraph", "Only the middle paragraphs", "Only in quotes", "Random sentences"],
            "correct_answer": "The first or last paragraph",
            "explanation": "Authors often state their main idea early (thesis) or summarize it at the end (conclusion).",
            "difficulty": 1,
        },
        {
            "question_text": "Which question best helps identify the main idea?",
            "options": ["What is the author's overall message?", "What date was this written?", "How many paragraphs are there?", "What is the first word?"],
            "correct_answer": "What is the author's overall message?",
            "explanation": "The main idea captures the author's central point or argument across the entire passage.",
            "difficulty": 1,
        },
        {
            "question_text": "A passage discusses renewable energy sources, their benefits, and challenges. The main idea is most likely:",
            "options": ["Renewable energy has both advantages and obstacles", "Solar panels are expensive", "Wind farms harm birds", "Fossil fuels are reliable"],
            "correct_answer": "Renewable energy has both advantages and obstacles",
            "explanation": "The main idea encompasses all discussed aspects - benefits AND challenges of renewable energy.",
            "difficulty": 2,
            "is_capstone": True,
        },
    ],
    "Subject-Verb Agreement": [
        {
            "question_text": "Choose the correct sentence:",
            "options": ["The team plays well together.", "The team play well together.", "The team are playing good.", "The teams plays well."],
            "correct_answer": "The team plays well together.",
            "explanation": "Collective nouns like 'team' typically take singular verbs in American English.",
            "difficulty": 1,
        },
        {
            "question_text": "Neither the teacher nor the students ___ ready for the test.",
            "options": ["were", "was", "is", "has been"],
            "correct_answer": "were",
            "explanation": "With neither...nor, the verb agrees with the closer subject (students = plural).",
            "difficulty": 2,
        },
        {
            "question_text": "The box of chocolates ___ on the table.",
            "options": ["is", "are", "were", "have been"],
            "correct_answer": "is",
            "explanation": "The subject is 'box' (singular), not 'chocolates.' Prepositional phrases don't affect agreement.",
            "difficulty": 2,
            "is_capstone": True,
        },
    ],
    "Comma Usage": [
        {
            "question_text": "Where should the comma go? 'After the rain stopped we went outside.'",
            "options": ["After 'stopped'", "After 'rain'", "After 'we'", "No comma needed"],
            "correct_answer": "After 'stopped'",
            "explanation": "Use a comma after an introductory clause: 'After the rain stopped, we went outside.'",
            "difficulty": 1,
        },
        {
            "question_text": "Which sentence uses commas correctly?",
            "options": ["My friend, who lives in Boston, is visiting.", "My friend who lives in Boston, is visiting.", "My friend, who lives in Boston is visiting.", "My friend who, lives in Boston, is visiting."],
            "correct_answer": "My friend, who lives in Boston, is visiting.",
            "explanation": "Nonessential (parenthetical) clauses need commas on both sides.",
            "difficulty": 2,
        },
        {
            "question_text": "Identify the correct comma usage: 'The old dusty book sat on the shelf.'",
            "options": ["The old, dusty book sat on the shelf.", "The old dusty, book sat on the shelf.", "The, old dusty book sat on the shelf.", "No change needed"],
            "correct_answer": "The old, dusty book sat on the shelf.",
            "explanation": "Use a comma between coordinate adjectives (adjectives that can be reordered or joined with 'and').",
            "difficulty": 2,
            "is_capstone": True,
        },
    ],
}


def default_questions(topic_name: str) -> list:
    """Generic question set for topics without hand-written questions"""
    return [
        {
            "question_text": f"Which strategy is most helpful for understanding {topic_name}?",
            "options": ["Practice with examples", "Memorize without understanding", "Skip to the test", "Read once quickly"],
            "correct_answer": "Practice with examples",
            "explanation": "Working through examples helps build understanding and reveals patterns.",
            "difficulty": 1,
        },
        {
            "question_text": f"What is a key concept in {topic_name}?",
            "options": ["Understanding the fundamentals", "Speed over accuracy", "Guessing randomly", "Skipping difficult parts"],
            "correct_answer": "Understanding the fundamentals",
            "explanation": "A strong foundation in the basics makes advanced concepts easier to grasp.",
            "difficulty": 1,
        },
        {
            "question_text": f"Apply your understanding of {topic_name} to solve this challenge.",
            "options": ["Think step by step", "Use trial and error only", "Choose the longest answer", "Pick randomly"],
            "correct_answer": "Think step by step",
            "explanation": "Breaking problems into steps helps ensure accuracy and understanding.",
            "difficulty": 3,
            "is_capstone": True,
        },
    ]


def questions_for_topic(topic_name: str) -> list:
    return QUESTION_SETS.get(topic_name) or default_questions(topic_name)
