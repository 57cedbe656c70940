"""Curated seed data: base vocabulary, grammar rules, irregular verbs, sentences."""


def _word(dutch: str, en: str, ru: str, uk: str, level: str) -> dict:
    return {
        'dutch': dutch,
        'translation_en': en,
        'translation_ru': ru,
        'translation_uk': uk,
        'level': level,
        'is_user_added': False
    }


SEED_WORDS = [
    # A1
    _word('het huis', 'house', 'дом', 'будинок', 'A1'),
    _word('de man', 'man', 'мужчина', 'чоловік', 'A1'),
    _word('de vrouw', 'woman', 'женщина', 'жінка', 'A1'),
    _word('het kind', 'child', 'ребёнок', 'дитина', 'A1'),
    _word('de kat', 'cat', 'кошка', 'кішка', 'A1'),
    _word('de hond', 'dog', 'собака', 'собака', 'A1'),
    _word('het water', 'water', 'вода', 'вода', 'A1'),
    _word('het brood', 'bread', 'хлеб', 'хліб', 'A1'),
    _word('groot', 'big', 'большой', 'великий', 'A1'),
    _word('klein', 'small', 'маленький', 'маленький', 'A1'),
    _word('de fiets', 'bicycle', 'велосипед', 'велосипед', 'A1'),
    _word('werken', 'to work', 'работать', 'працювати', 'A1'),
    _word('eten', 'to eat', 'есть', 'їсти', 'A1'),
    _word('drinken', 'to drink', 'пить', 'пити', 'A1'),
    _word('vandaag', 'today', 'сегодня', 'сьогодні', 'A1'),
    # A2
    _word('de afspraak', 'appointment', 'встреча', 'зустріч', 'A2'),
    _word('het weer', 'weather', 'погода', 'погода', 'A2'),
    _word('de rekening', 'bill', 'счёт', 'рахунок', 'A2'),
    _word('verhuizen', 'to move house', 'переезжать', 'переїжджати', 'A2'),
    _word('gezellig', 'cosy', 'уютный', 'затишний', 'A2'),
    _word('de buurman', 'neighbour', 'сосед', 'сусід', 'A2'),
    _word('boodschappen doen', 'to do the shopping', 'делать покупки', 'робити покупки', 'A2'),
    _word('het station', 'station', 'вокзал', 'вокзал', 'A2'),
    # B1
    _word('de ervaring', 'experience', 'опыт', 'досвід', 'B1'),
    _word('de gewoonte', 'habit', 'привычка', 'звичка', 'B1'),
    _word('ondanks', 'despite', 'несмотря на', 'незважаючи на', 'B1'),
    _word('verantwoordelijk', 'responsible', 'ответственный', 'відповідальний', 'B1'),
    _word('de vergadering', 'meeting', 'собрание', 'збори', 'B1'),
    _word('overleggen', 'to consult', 'совещаться', 'радитися', 'B1'),
    # B2
    _word('de aanpak', 'approach', 'подход', 'підхід', 'B2'),
    _word('beschikbaar', 'available', 'доступный', 'доступний', 'B2'),
    _word('de voorwaarde', 'condition', 'условие', 'умова', 'B2'),
    _word('uitgebreid', 'extensive', 'обширный', 'розширений', 'B2'),
    _word('de ontwikkeling', 'development', 'развитие', 'розвиток', 'B2'),
    _word('één', 'one', 'один', 'один', 'A1'),
]


GRAMMAR_RULES = [
    {
        'title': 'De / het: the definite articles',
        'difficulty': 'A1',
        'explanation': (
            "Dutch has two definite articles.\n\n"
            "- de: common gender, about two thirds of all nouns (de man, de tafel)\n"
            "- het: neuter nouns and every diminutive in -je (het huis, het boekje)\n\n"
            "The plural always takes de: de huizen, de kinderen.\n"
            "Learn the article together with the noun."
        )
    },
    {
        'title': 'Present tense',
        'difficulty': 'A1',
        'explanation': (
            "Find the stem by removing -en: werken -> werk.\n\n"
            "ik werk, jij werkt, hij werkt, wij/jullie/zij werken.\n\n"
            "When jij follows the verb the -t drops: Werk jij hier?"
        )
    },
    {
        'title': 'Negation: niet / geen',
        'difficulty': 'A1',
        'explanation': (
            "geen replaces een or a missing article: Ik heb geen auto.\n"
            "niet is used everywhere else: Ik werk niet. Het is niet groot."
        )
    },
    {
        'title': 'Word order: the verb-second rule',
        'difficulty': 'A2',
        'explanation': (
            "The finite verb is always the second element of a main clause.\n\n"
            "Ik werk vandaag. / Vandaag werk ik.\n"
            "In yes/no questions the verb comes first: Werk jij hier?"
        )
    },
    {
        'title': 'Perfect tense (perfectum)',
        'difficulty': 'A2',
        'explanation': (
            "hebben/zijn + past participle.\n\n"
            "Weak verbs: ge- + stem + -t/-d ('t kofschip decides): gewerkt, geleefd.\n"
            "Strong verbs: ge- + changed stem + -en: geschreven, gelezen.\n"
            "Verbs of movement and change of state take zijn: Ik ben gegaan."
        )
    },
    {
        'title': 'Separable verbs',
        'difficulty': 'B1',
        'explanation': (
            "In a main clause the prefix moves to the end: opstaan -> Ik sta om 7 uur op.\n"
            "In the perfect the ge- goes between prefix and stem: opgebeld, meegenomen."
        )
    },
    {
        'title': 'Subordinate clauses',
        'difficulty': 'B1',
        'explanation': (
            "After dat, omdat, als, wanneer, terwijl the verb goes to the end.\n\n"
            "Ik weet dat hij morgen komt.\n"
            "Omdat het regent, blijf ik thuis."
        )
    },
    {
        'title': 'Passive voice',
        'difficulty': 'B2',
        'explanation': (
            "worden + past participle: Het boek wordt gelezen.\n"
            "Perfect: Het boek is gelezen (not 'is geworden').\n"
            "The agent is introduced with door."
        )
    },
]


def _verb(infinitive: str, past_singular: str, past_participle: str,
          translation: str, example: str) -> dict:
    return {
        'infinitive': infinitive,
        'past_singular': past_singular,
        'past_participle': past_participle,
        'translation': translation,
        'example': example
    }


IRREGULAR_VERBS = [
    _verb('zijn', 'was', 'geweest', 'to be', 'Ik ben thuis geweest.'),
    _verb('hebben', 'had', 'gehad', 'to have', 'Wij hebben geluk gehad.'),
    _verb('gaan', 'ging', 'gegaan', 'to go', 'Zij is naar huis gegaan.'),
    _verb('komen', 'kwam', 'gekomen', 'to come', 'Hij kwam te laat.'),
    _verb('doen', 'deed', 'gedaan', 'to do', 'Wat heb je gedaan?'),
    _verb('zien', 'zag', 'gezien', 'to see', 'Ik heb de film gezien.'),
    _verb('eten', 'at', 'gegeten', 'to eat', 'We hebben al gegeten.'),
    _verb('drinken', 'dronk', 'gedronken', 'to drink', 'Hij dronk koffie.'),
    _verb('schrijven', 'schreef', 'geschreven', 'to write', 'Zij schreef een brief.'),
    _verb('lezen', 'las', 'gelezen', 'to read', 'Ik heb het boek gelezen.'),
    _verb('spreken', 'sprak', 'gesproken', 'to speak', 'Wij spraken Nederlands.'),
    _verb('nemen', 'nam', 'genomen', 'to take', 'Ik heb de trein genomen.'),
    _verb('geven', 'gaf', 'gegeven', 'to give', 'Hij gaf mij een cadeau.'),
    _verb('vinden', 'vond', 'gevonden', 'to find', 'Ik heb mijn sleutels gevonden.'),
    _verb('blijven', 'bleef', 'gebleven', 'to stay', 'Zij is thuis gebleven.'),
]


def _sentence(dutch: str, english: str, level: str = None) -> dict:
    return {'dutch': dutch, 'english': english, 'level': level}


CONTEXT_SENTENCES = [
    _sentence('Het huis is groot.', 'The house is big.', 'A1'),
    _sentence('Ik ga naar huis.', 'I am going home.', 'A1'),
    _sentence('De kat slaapt op de bank.', 'The cat is sleeping on the couch.', 'A1'),
    _sentence('Mijn broer woont in Amsterdam.', 'My brother lives in Amsterdam.', 'A1'),
    _sentence('Ik drink elke ochtend koffie.', 'I drink coffee every morning.', 'A1'),
    _sentence('Het kind speelt in de tuin.', 'The child is playing in the garden.', 'A1'),
    _sentence('Wij eten om zes uur.', 'We eat at six o\'clock.', 'A1'),
    _sentence('Hij fietst naar zijn werk.', 'He cycles to work.', 'A1'),
    _sentence('Vandaag werk ik thuis.', 'Today I am working from home.', 'A2'),
    _sentence('Het weer is vandaag erg mooi.', 'The weather is very nice today.', 'A2'),
    _sentence('Ik heb een afspraak bij de dokter.', 'I have an appointment at the doctor\'s.', 'A2'),
    _sentence('Mag ik de rekening, alstublieft?', 'May I have the bill, please?', 'A2'),
    _sentence('We gaan volgend jaar verhuizen.', 'We are moving house next year.', 'A2'),
    _sentence('Het was een gezellige avond.', 'It was a cosy evening.', 'A2'),
    _sentence('Mijn buurman heeft een nieuwe fiets.', 'My neighbour has a new bicycle.', 'A2'),
    _sentence('Ik moet nog boodschappen doen.', 'I still have to do the shopping.', 'A2'),
    _sentence('Hij heeft veel ervaring met kinderen.', 'He has a lot of experience with children.', 'B1'),
    _sentence('Ondanks de regen gingen we wandelen.', 'Despite the rain we went for a walk.', 'B1'),
    _sentence('Zij is verantwoordelijk voor het project.', 'She is responsible for the project.', 'B1'),
    _sentence('De vergadering begint om negen uur.', 'The meeting starts at nine o\'clock.', 'B1'),
    _sentence('Ik weet dat hij morgen komt.', 'I know that he is coming tomorrow.', 'B1'),
    _sentence('Omdat het regent, blijf ik thuis.', 'Because it is raining, I am staying home.', 'B1'),
    _sentence('Deze aanpak werkt beter dan de vorige.', 'This approach works better than the previous one.', 'B2'),
    _sentence('Is deze kamer nog beschikbaar?', 'Is this room still available?', 'B2'),
    _sentence('Het boek wordt door veel mensen gelezen.', 'The book is read by many people.', 'B2'),
    _sentence('Onder welke voorwaarden kan ik meedoen?', 'Under which conditions can I take part?', 'B2'),
    _sentence('Thuis', 'Home'),
    _sentence('Welkom thuis', 'Welcome home'),
]
