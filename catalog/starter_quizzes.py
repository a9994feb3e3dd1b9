"""Quizzes loaded by the ``seed`` command on a fresh database."""

STARTER_QUIZZES = [
    {
        "title": "Planetas Rochosos",
        "description": "Teste seus conhecimentos sobre Mercúrio, Vênus, Terra e Marte",
        "difficulty": "easy",
        "order": 1,
        "questions": [
            {
                "question": "Qual é o planeta mais próximo do Sol?",
                "options": ["Mercúrio", "Vênus", "Terra", "Marte"],
                "correct_answer": "Mercúrio",
                "explanation": "Mercúrio é o planeta mais próximo do Sol, a uma distância média de 57,9 milhões de km.",
                "planet": "mercury",
            },
            {
                "question": "Qual planeta é conhecido como 'Planeta Vermelho'?",
                "options": ["Mercúrio", "Vênus", "Terra", "Marte"],
                "correct_answer": "Marte",
                "explanation": "Marte é conhecido como Planeta Vermelho devido ao óxido de ferro em sua superfície.",
                "planet": "mars",
            },
            {
                "question": "Qual planeta tem a atmosfera mais densa?",
                "options": ["Mercúrio", "Vênus", "Terra", "Marte"],
                "correct_answer": "Vênus",
                "explanation": "Vênus tem uma atmosfera extremamente densa, 90 vezes mais densa que a da Terra.",
                "planet": "venus",
            },
            {
                "question": "A Terra possui apenas uma lua natural.",
                "type": "true_false",
                "correct_answer": "true",
                "explanation": "A Terra possui apenas uma lua natural, simplesmente chamada de Lua.",
                "planet": "earth",
            },
        ],
    },
    {
        "title": "Gigantes Gasosos",
        "description": "Explore os mistérios de Júpiter, Saturno, Urano e Netuno",
        "difficulty": "medium",
        "order": 2,
        "questions": [
            {
                "question": "Qual é o maior planeta do Sistema Solar?",
                "options": ["Júpiter", "Saturno", "Urano", "Netuno"],
                "correct_answer": "Júpiter",
                "explanation": "Júpiter é o maior planeta, com mais massa que todos os outros planetas combinados.",
                "planet": "jupiter",
            },
            {
                "question": "Qual planeta é famoso por seus anéis?",
                "options": ["Júpiter", "Saturno", "Urano", "Netuno"],
                "correct_answer": "Saturno",
                "explanation": "Saturno é famoso por seus espetaculares anéis, embora outros gigantes gasosos também os tenham.",
                "planet": "saturn",
            },
            {
                "question": "Quantas luas Júpiter possui aproximadamente?",
                "options": ["12", "27", "53", "95"],
                "correct_answer": "95",
                "explanation": "Júpiter possui mais de 95 luas conhecidas, incluindo as quatro grandes luas galileanas.",
                "planet": "jupiter",
            },
            {
                "question": "Qual é a característica mais marcante de Netuno?",
                "options": ["Anéis", "Grande Mancha Vermelha", "Ventos extremos", "Muitas luas"],
                "correct_answer": "Ventos extremos",
                "explanation": "Netuno possui os ventos mais rápidos do Sistema Solar, chegando a 2.100 km/h.",
                "planet": "neptune",
            },
        ],
    },
    {
        "title": "Sistema Solar Básico",
        "description": "Teste seus conhecimentos básicos sobre o Sistema Solar",
        "difficulty": "easy",
        "order": 3,
        "questions": [
            {
                "question": "Quantos planetas existem no Sistema Solar?",
                "options": ["7", "8", "9", "10"],
                "correct_answer": "8",
                "explanation": "Existem 8 planetas no Sistema Solar desde que Plutão foi reclassificado como planeta anão em 2006.",
            },
            {
                "question": "Qual é o nome do planeta anão reclassificado em 2006?",
                "type": "text",
                "correct_answer": "Plutão",
                "explanation": "Plutão deixou de ser considerado planeta em 2006 e passou a ser um planeta anão.",
                "points": 2,
            },
        ],
    },
]
