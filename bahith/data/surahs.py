"""
Surah metadata: Arabic name, English transliteration, meaning, verse count
and place of revelation, for all 114 surahs.
"""

# (number, arabic name, transliteration, meaning, verses, revelation)
SURAHS = (
    (1, "الفاتحة", "Al-Fatihah", "The Opening", 7, "makki"),
    (2, "البقرة", "Al-Baqarah", "The Cow", 286, "madani"),
    (3, "آل عمران", "Ali 'Imran", "Family of Imran", 200, "madani"),
    (4, "النساء", "An-Nisa", "The Women", 176, "madani"),
    (5, "المائدة", "Al-Ma'idah", "The Table Spread", 120, "madani"),
    (6, "الأنعام", "Al-An'am", "The Cattle", 165, "makki"),
    (7, "الأعراف", "Al-A'raf", "The Heights", 206, "makki"),
    (8, "الأنفال", "Al-Anfal", "The Spoils of War", 75, "madani"),
    (9, "التوبة", "At-Tawbah", "The Repentance", 129, "madani"),
    (10, "يونس", "Yunus", "Jonah", 109, "makki"),
    (11, "هود", "Hud", "Hud", 123, "makki"),
    (12, "يوسف", "Yusuf", "Joseph", 111, "makki"),
    (13, "الرعد", "Ar-Ra'd", "The Thunder", 43, "madani"),
    (14, "إبراهيم", "Ibrahim", "Abraham", 52, "makki"),
    (15, "الحجر", "Al-Hijr", "The Rocky Tract", 99, "makki"),
    (16, "النحل", "An-Nahl", "The Bee", 128, "makki"),
    (17, "الإسراء", "Al-Isra", "The Night Journey", 111, "makki"),
    (18, "الكهف", "Al-Kahf", "The Cave", 110, "makki"),
    (19, "مريم", "Maryam", "Mary", 98, "makki"),
    (20, "طه", "Taha", "Ta-Ha", 135, "makki"),
    (21, "الأنبياء", "Al-Anbiya", "The Prophets", 112, "makki"),
    (22, "الحج", "Al-Hajj", "The Pilgrimage", 78, "madani"),
    (23, "المؤمنون", "Al-Mu'minun", "The Believers", 118, "makki"),
    (24, "النور", "An-Nur", "The Light", 64, "madani"),
    (25, "الفرقان", "Al-Furqan", "The Criterion", 77, "makki"),
    (26, "الشعراء", "Ash-Shu'ara", "The Poets", 227, "makki"),
    (27, "النمل", "An-Naml", "The Ant", 93, "makki"),
    (28, "القصص", "Al-Qasas", "The Stories", 88, "makki"),
    (29, "العنكبوت", "Al-'Ankabut", "The Spider", 69, "makki"),
    (30, "الروم", "Ar-Rum", "The Romans", 60, "makki"),
    (31, "لقمان", "Luqman", "Luqman", 34, "makki"),
    (32, "السجدة", "As-Sajdah", "The Prostration", 30, "makki"),
    (33, "الأحزاب", "Al-Ahzab", "The Combined Forces", 73, "madani"),
    (34, "سبإ", "Saba", "Sheba", 54, "makki"),
    (35, "فاطر", "Fatir", "Originator", 45, "makki"),
    (36, "يس", "Ya-Sin", "Ya Sin", 83, "makki"),
    (37, "الصافات", "As-Saffat", "Those Who Set the Ranks", 182, "makki"),
    (38, "ص", "Sad", "The Letter Sad", 88, "makki"),
    (39, "الزمر", "Az-Zumar", "The Troops", 75, "makki"),
    (40, "غافر", "Ghafir", "The Forgiver", 85, "makki"),
    (41, "فصلت", "Fussilat", "Explained in Detail", 54, "makki"),
    (42, "الشورى", "Ash-Shuraa", "The Consultation", 53, "makki"),
    (43, "الزخرف", "Az-Zukhruf", "The Ornaments of Gold", 89, "makki"),
    (44, "الدخان", "Ad-Dukhan", "The Smoke", 59, "makki"),
    (45, "الجاثية", "Al-Jathiyah", "The Crouching", 37, "makki"),
    (46, "الأحقاف", "Al-Ahqaf", "The Wind-Curved Sandhills", 35, "makki"),
    (47, "محمد", "Muhammad", "Muhammad", 38, "madani"),
    (48, "الفتح", "Al-Fath", "The Victory", 29, "madani"),
    (49, "الحجرات", "Al-Hujurat", "The Rooms", 18, "madani"),
    (50, "ق", "Qaf", "The Letter Qaf", 45, "makki"),
    (51, "الذاريات", "Adh-Dhariyat", "The Winnowing Winds", 60, "makki"),
    (52, "الطور", "At-Tur", "The Mount", 49, "makki"),
    (53, "النجم", "An-Najm", "The Star", 62, "makki"),
    (54, "القمر", "Al-Qamar", "The Moon", 55, "makki"),
    (55, "الرحمن", "Ar-Rahman", "The Beneficent", 78, "madani"),
    (56, "الواقعة", "Al-Waqi'ah", "The Inevitable", 96, "makki"),
    (57, "الحديد", "Al-Hadid", "The Iron", 29, "madani"),
    (58, "المجادلة", "Al-Mujadila", "The Pleading Woman", 22, "madani"),
    (59, "الحشر", "Al-Hashr", "The Exile", 24, "madani"),
    (60, "الممتحنة", "Al-Mumtahanah", "She That Is to Be Examined", 13, "madani"),
    (61, "الصف", "As-Saf", "The Ranks", 14, "madani"),
    (62, "الجمعة", "Al-Jumu'ah", "Friday", 11, "madani"),
    (63, "المنافقون", "Al-Munafiqun", "The Hypocrites", 11, "madani"),
    (64, "التغابن", "At-Taghabun", "The Mutual Disillusion", 18, "madani"),
    (65, "الطلاق", "At-Talaq", "The Divorce", 12, "madani"),
    (66, "التحريم", "At-Tahrim", "The Prohibition", 12, "madani"),
    (67, "الملك", "Al-Mulk", "The Sovereignty", 30, "makki"),
    (68, "القلم", "Al-Qalam", "The Pen", 52, "makki"),
    (69, "الحاقة", "Al-Haqqah", "The Reality", 52, "makki"),
    (70, "المعارج", "Al-Ma'arij", "The Ascending Stairways", 44, "makki"),
    (71, "نوح", "Nuh", "Noah", 28, "makki"),
    (72, "الجن", "Al-Jinn", "The Jinn", 28, "makki"),
    (73, "المزمل", "Al-Muzzammil", "The Enshrouded One", 20, "makki"),
    (74, "المدثر", "Al-Muddaththir", "The Cloaked One", 56, "makki"),
    (75, "القيامة", "Al-Qiyamah", "The Resurrection", 40, "makki"),
    (76, "الإنسان", "Al-Insan", "The Man", 31, "madani"),
    (77, "المرسلات", "Al-Mursalat", "The Emissaries", 50, "makki"),
    (78, "النبأ", "An-Naba", "The Tidings", 40, "makki"),
    (79, "النازعات", "An-Nazi'at", "Those Who Drag Forth", 46, "makki"),
    (80, "عبس", "'Abasa", "He Frowned", 42, "makki"),
    (81, "التكوير", "At-Takwir", "The Overthrowing", 29, "makki"),
    (82, "الانفطار", "Al-Infitar", "The Cleaving", 19, "makki"),
    (83, "المطففين", "Al-Mutaffifin", "The Defrauding", 36, "makki"),
    (84, "الانشقاق", "Al-Inshiqaq", "The Sundering", 25, "makki"),
    (85, "البروج", "Al-Buruj", "The Mansions of the Stars", 22, "makki"),
    (86, "الطارق", "At-Tariq", "The Nightcomer", 17, "makki"),
    (87, "الأعلى", "Al-A'la", "The Most High", 19, "makki"),
    (88, "الغاشية", "Al-Ghashiyah", "The Overwhelming", 26, "makki"),
    (89, "الفجر", "Al-Fajr", "The Dawn", 30, "makki"),
    (90, "البلد", "Al-Balad", "The City", 20, "makki"),
    (91, "الشمس", "Ash-Shams", "The Sun", 15, "makki"),
    (92, "الليل", "Al-Layl", "The Night", 21, "makki"),
    (93, "الضحى", "Ad-Duhaa", "The Morning Hours", 11, "makki"),
    (94, "الشرح", "Ash-Sharh", "The Relief", 8, "makki"),
    (95, "التين", "At-Tin", "The Fig", 8, "makki"),
    (96, "العلق", "Al-'Alaq", "The Clot", 19, "makki"),
    (97, "القدر", "Al-Qadr", "The Power", 5, "makki"),
    (98, "البينة", "Al-Bayyinah", "The Clear Proof", 8, "madani"),
    (99, "الزلزلة", "Az-Zalzalah", "The Earthquake", 8, "madani"),
    (100, "العاديات", "Al-'Adiyat", "The Courser", 11, "makki"),
    (101, "القارعة", "Al-Qari'ah", "The Calamity", 11, "makki"),
    (102, "التكاثر", "At-Takathur", "The Rivalry in World Increase", 8, "makki"),
    (103, "العصر", "Al-'Asr", "The Declining Day", 3, "makki"),
    (104, "الهمزة", "Al-Humazah", "The Traducer", 9, "makki"),
    (105, "الفيل", "Al-Fil", "The Elephant", 5, "makki"),
    (106, "قريش", "Quraysh", "Quraysh", 4, "makki"),
    (107, "الماعون", "Al-Ma'un", "The Small Kindnesses", 7, "makki"),
    (108, "الكوثر", "Al-Kawthar", "The Abundance", 3, "makki"),
    (109, "الكافرون", "Al-Kafirun", "The Disbelievers", 6, "makki"),
    (110, "النصر", "An-Nasr", "The Divine Support", 3, "madani"),
    (111, "المسد", "Al-Masad", "The Palm Fiber", 5, "makki"),
    (112, "الإخلاص", "Al-Ikhlas", "The Sincerity", 4, "makki"),
    (113, "الفلق", "Al-Falaq", "The Daybreak", 5, "makki"),
    (114, "الناس", "An-Nas", "Mankind", 6, "makki"),
)

# Other names a surah is commonly known by
EXTRA_VARIANTS_AR = {
    1: ["فاتحة الكتاب", "أم الكتاب"],
    9: ["براءة"],
    17: ["بني إسرائيل"],
    40: ["المؤمن"],
    41: ["حم السجدة"],
    47: ["القتال"],
    67: ["تبارك"],
    76: ["الدهر"],
    94: ["الانشراح"],
    111: ["اللهب", "تبت"],
    112: ["التوحيد"],
}

EXTRA_VARIANTS_EN = {
    1: ["Fatiha", "Fatihah", "Al-Fatiha"],
    2: ["Baqara"],
    3: ["Ale Imran", "Al Imran"],
    9: ["Bara'ah"],
    17: ["Bani Isra'il"],
    36: ["Yasin", "Ya Seen", "Yaseen"],
    40: ["Al-Mu'min"],
    41: ["Ha-Mim Sajdah"],
    47: ["Al-Qital"],
    55: ["Rahman"],
    56: ["Waqiah", "Waqia"],
    67: ["Tabarak"],
    76: ["Ad-Dahr"],
    94: ["Al-Inshirah"],
    111: ["Al-Lahab"],
    112: ["At-Tawhid"],
}
