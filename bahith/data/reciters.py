"""
Bundled reciter names with Arabic spellings and English transliterations.
"""

RECITERS = (
    {
        "id": "saud-al-shuraim",
        "name_ar": "سعود الشريم",
        "variants_ar": ["سعود بن ابراهيم الشريم", "الشيخ سعود الشريم"],
        "name_en": "Saud Al-Shuraim",
        "variants_en": [
            "Saud Al Shuraim",
            "Saud Al-Shuraym",
            "Saud Shuraim",
            "Saud Alshuraim",
            "Saud Bin Ibrahim Al Shuraim",
        ],
        "aliases": ["shuraim", "الشريم"],
    },
    {
        "id": "mishary-al-afasy",
        "name_ar": "مشاري العفاسي",
        "variants_ar": ["مشاري راشد العفاسي", "الشيخ مشاري العفاسي"],
        "name_en": "Mishary Al-Afasy",
        "variants_en": [
            "Mishary Al Afasy",
            "Mishary Rashid Al-Afasy",
            "Mishary Alafasy",
            "Mishary Rashid Alafasy",
            "Mishary El-Afasy",
            "Afasy",
        ],
        "aliases": ["afasy", "العفاسي"],
    },
    {
        "id": "mahmoud-al-husary",
        "name_ar": "محمود خليل الحصري",
        "variants_ar": ["الشيخ محمود خليل الحصري", "الحصري"],
        "name_en": "Mahmoud Khalil Al-Husary",
        "variants_en": [
            "Mahmoud Al-Husary",
            "Mahmoud Al Husary",
            "Mahmoud Husary",
            "Mahmoud Khalil Al-Hussary",
            "Al-Husary",
            "Al Husary",
            "Husary",
        ],
        "aliases": ["husary", "الحصري", "hussary"],
    },
    {
        "id": "abdul-rahman-al-sudais",
        "name_ar": "عبد الرحمن السديس",
        "variants_ar": ["الشيخ عبد الرحمن السديس", "عبدالرحمن السديس"],
        "name_en": "Abdul Rahman Al-Sudais",
        "variants_en": [
            "Abdulrahman Al-Sudais",
            "Abdurrahman Al-Sudais",
            "Abdul Rahman Al Sudais",
            "Abdulrahman Al Sudais",
            "Abdurrahman Al Sudais",
            "Al-Sudais",
            "Al Sudais",
            "Sudais",
        ],
        "aliases": ["sudais", "السديس"],
    },
    {
        "id": "muhammad-al-minshawi",
        "name_ar": "محمد صديق المنشاوي",
        "variants_ar": ["الشيخ محمد المنشاوي", "المنشاوي", "محمد المنشاوي"],
        "name_en": "Muhammad Al-Minshawi",
        "variants_en": [
            "Mohammed Al-Minshawi",
            "Mohamed Al-Minshawi",
            "Muhammad Al Minshawi",
            "Mohammed Al Minshawi",
            "Al-Minshawi",
            "Al Minshawi",
            "Minshawi",
        ],
        "aliases": ["minshawi", "المنشاوي"],
    },
    {
        "id": "muhammad-siddiq-al-minshawi",
        "name_ar": "محمد صديق المنشاوي",
        "variants_ar": ["الشيخ محمد صديق المنشاوي"],
        "name_en": "Muhammad Siddiq Al-Minshawi",
        "variants_en": [
            "Mohammed Siddiq Al-Minshawi",
            "Mohamed Siddiq Al-Minshawi",
            "Muhammed Siddiq Al-Minshawi",
            "Muhammad Sadiq Al-Minshawi",
        ],
        "aliases": ["siddiq minshawi"],
    },
    {
        "id": "abu-bakr-al-shatri",
        "name_ar": "أبو بكر الشاطري",
        "variants_ar": ["الشيخ أبو بكر الشاطري", "الشاطري"],
        "name_en": "Abu Bakr Al-Shatri",
        "variants_en": [
            "Abu Bakr Ash-Shatri",
            "Abu Bakr Al Shatri",
            "Abubakr Al-Shatri",
            "Al-Shatri",
            "Al Shatri",
            "Shatri",
        ],
        "aliases": ["shatri", "الشاطري"],
    },
    {
        "id": "yasser-al-dosari",
        "name_ar": "ياسر الدوسري",
        "variants_ar": ["الشيخ ياسر الدوسري", "ياسر بن راشد الدوسري"],
        "name_en": "Yasser Al-Dosari",
        "variants_en": [
            "Yasser Al Dosari",
            "Yasser Aldosari",
            "Yaser Al-Dosari",
            "Yassir Al-Dosari",
            "Al-Dosari",
            "Al Dosari",
            "Dosari",
        ],
        "aliases": ["dosari", "الدوسري"],
    },
    {
        "id": "maher-al-muaiqly",
        "name_ar": "ماهر المعيقلي",
        "variants_ar": ["الشيخ ماهر المعيقلي", "ماهر بن حمد المعيقلي"],
        "name_en": "Maher Al-Muaiqly",
        "variants_en": [
            "Maher Al Muaiqly",
            "Maher Al-Muaiqli",
            "Maher Muaiqly",
            "Maher Al-Muaqily",
            "Al-Muaiqly",
            "Al Muaiqly",
            "Muaiqly",
        ],
        "aliases": ["muaiqly", "المعيقلي", "muaiqli"],
    },
    {
        "id": "nasser-al-qatami",
        "name_ar": "ناصر القطامي",
        "variants_ar": ["الشيخ ناصر القطامي"],
        "name_en": "Nasser Al-Qatami",
        "variants_en": [
            "Nasser Al Qatami",
            "Naser Al-Qatami",
            "Nassir Al-Qatami",
            "Al-Qatami",
            "Al Qatami",
            "Qatami",
        ],
        "aliases": ["qatami", "القطامي"],
    },
    {
        "id": "salah-al-budair",
        "name_ar": "صلاح البدير",
        "variants_ar": ["الشيخ صلاح البدير", "صلاح بن محمد البدير"],
        "name_en": "Salah Al-Budair",
        "variants_en": [
            "Salah Al Budair",
            "Salah Albudair",
            "Salah Al-Budeir",
            "Salah Al-Budayr",
            "Al-Budair",
            "Al Budair",
            "Budair",
        ],
        "aliases": ["budair", "البدير"],
    },
    {
        "id": "ahmed-al-ajmi",
        "name_ar": "أحمد بن علي العجمي",
        "variants_ar": ["الشيخ أحمد العجمي", "أحمد العجمي"],
        "name_en": "Ahmed Al-Ajmi",
        "variants_en": [
            "Ahmad Al-Ajmi",
            "Ahmed Al Ajmi",
            "Ahmad Al Ajmi",
            "Ahmed Alajmi",
            "Ahmed Al-Ajamy",
            "Al-Ajmi",
            "Al Ajmi",
            "Ajmi",
        ],
        "aliases": ["ajmi", "العجمي"],
    },
    {
        "id": "fares-abbad",
        "name_ar": "فارس عباد",
        "variants_ar": ["الشيخ فارس عباد"],
        "name_en": "Fares Abbad",
        "variants_en": ["Faris Abbad", "Fares Abad", "Faris Abad", "Fares Abbadi", "Abbad"],
        "aliases": ["abbad", "عباد"],
    },
    {
        "id": "saad-al-ghamdi",
        "name_ar": "سعد الغامدي",
        "variants_ar": ["الشيخ سعد الغامدي", "سعد بن سعيد الغامدي"],
        "name_en": "Saad Al-Ghamdi",
        "variants_en": [
            "Saad Al Ghamdi",
            "Saad Alghamdi",
            "Saad El-Ghamdi",
            "Saad Al-Ghamidi",
            "Al-Ghamdi",
            "Al Ghamdi",
            "Ghamdi",
        ],
        "aliases": ["ghamdi", "الغامدي"],
    },
    {
        "id": "muhammad-al-muhaysini",
        "name_ar": "محمد المحيسني",
        "variants_ar": ["الشيخ محمد المحيسني"],
        "name_en": "Muhammad Al-Muhaysini",
        "variants_en": [
            "Mohammed Al-Muhaysini",
            "Mohamed Al-Muhaysini",
            "Muhammad Al Muhaysini",
            "Al-Muhaysini",
            "Al Muhaysini",
            "Muhaysini",
        ],
        "aliases": ["muhaysini", "المحيسني"],
    },
    {
        "id": "abdul-basit-abdus-samad",
        "name_ar": "عبد الباسط عبد الصمد",
        "variants_ar": ["الشيخ عبد الباسط عبد الصمد", "عبدالباسط عبدالصمد"],
        "name_en": "Abdul Basit Abdus Samad",
        "variants_en": [
            "Abdulbasit Abdus Samad",
            "Abdul Basit Abdus-Samad",
            "Abdulbasit Abdussamad",
            "Abdul Basit",
            "Abdulbasit",
            "Abd El-Basit",
            "Abdul Baset",
        ],
        "aliases": ["abdul basit", "عبد الباسط", "abdussamad", "abdus samad"],
    },
    {
        "id": "hani-ar-rifai",
        "name_ar": "هاني الرفاعي",
        "variants_ar": ["الشيخ هاني الرفاعي"],
        "name_en": "Hani Ar-Rifai",
        "variants_en": [
            "Hani Al-Rifai",
            "Hani Ar Rifai",
            "Hani Al Rifai",
            "Hany Ar-Rifai",
            "Al-Rifai",
            "Ar-Rifai",
            "Rifai",
        ],
        "aliases": ["rifai", "الرفاعي"],
    },
    {
        "id": "muhammad-al-jibril",
        "name_ar": "محمد جبريل",
        "variants_ar": ["الشيخ محمد جبريل", "محمد سعيد جبريل"],
        "name_en": "Muhammad Al-Jibril",
        "variants_en": [
            "Mohammed Al-Jibril",
            "Mohamed Al-Jibril",
            "Muhammad Jibril",
            "Mohammed Jibril",
            "Muhammad Aljibril",
            "Jibril",
        ],
        "aliases": ["jibril", "جبريل", "gabriel"],
    },
    {
        "id": "khalid-al-jalil",
        "name_ar": "خالد الجليل",
        "variants_ar": ["الشيخ خالد الجليل"],
        "name_en": "Khalid Al-Jalil",
        "variants_en": [
            "Khaled Al-Jalil",
            "Khalid Al Jalil",
            "Khaled Al Jalil",
            "Khalid Aljalil",
            "Al-Jalil",
            "Al Jalil",
            "Jalil",
        ],
        "aliases": ["jalil", "الجليل"],
    },
    {
        "id": "abdullah-al-matroud",
        "name_ar": "عبد الله المطرود",
        "variants_ar": ["الشيخ عبد الله المطرود", "عبدالله المطرود"],
        "name_en": "Abdullah Al-Matroud",
        "variants_en": [
            "Abdullah Al Matroud",
            "Abdullah Almatroud",
            "Abdallah Al-Matroud",
            "Al-Matroud",
            "Al Matroud",
            "Matroud",
        ],
        "aliases": ["matroud", "المطرود"],
    },
    {
        "id": "muhammad-ayyub",
        "name_ar": "محمد أيوب",
        "variants_ar": ["الشيخ محمد أيوب"],
        "name_en": "Muhammad Ayyub",
        "variants_en": [
            "Mohammed Ayyub",
            "Mohamed Ayyub",
            "Muhammad Ayub",
            "Mohammed Ayub",
            "Muhammad Ayoub",
            "Ayyub",
            "Ayub",
        ],
        "aliases": ["ayyub", "أيوب", "ayoub"],
    },
    {
        "id": "mustafa-al-lahoni",
        "name_ar": "مصطفى اللحوني",
        "variants_ar": ["الشيخ مصطفى اللحوني"],
        "name_en": "Mustafa Al-Lahoni",
        "variants_en": [
            "Mustafa Al Lahoni",
            "Mostafa Al-Lahoni",
            "Mustafa Al-Lahouni",
            "Al-Lahoni",
            "Al Lahoni",
            "Lahoni",
        ],
        "aliases": ["lahoni", "اللحوني"],
    },
    {
        "id": "ibrahim-al-akhdar",
        "name_ar": "إبراهيم الأخضر",
        "variants_ar": ["الشيخ إبراهيم الأخضر"],
        "name_en": "Ibrahim Al-Akhdar",
        "variants_en": [
            "Ibrahim Al Akhdar",
            "Ibrahim Alakhdar",
            "Ibrahim Al-Akhadar",
            "Al-Akhdar",
            "Al Akhdar",
            "Akhdar",
        ],
        "aliases": ["akhdar", "الأخضر"],
    },
    {
        "id": "ali-al-hudhaifi",
        "name_ar": "علي الحذيفي",
        "variants_ar": ["الشيخ علي الحذيفي", "علي بن عبد الرحمن الحذيفي"],
        "name_en": "Ali Al-Hudhaifi",
        "variants_en": [
            "Ali Al Hudhaifi",
            "Ali Alhudhaifi",
            "Ali Al-Hudaifi",
            "Ali Al-Huthayfi",
            "Al-Hudhaifi",
            "Al Hudhaifi",
            "Hudhaifi",
        ],
        "aliases": ["hudhaifi", "الحذيفي", "hudaifi"],
    },
    {
        "id": "bandar-baleelah",
        "name_ar": "بندر بليلة",
        "variants_ar": ["الشيخ بندر بليلة"],
        "name_en": "Bandar Baleelah",
        "variants_en": ["Bandar Balilah", "Bandar Baleela", "Bander Baleelah", "Baleelah", "Balilah"],
        "aliases": ["baleelah", "بليلة", "balilah"],
    },
    {
        "id": "yasser-salama",
        "name_ar": "ياسر سلامة",
        "variants_ar": ["الشيخ ياسر سلامة"],
        "name_en": "Yasser Salama",
        "variants_en": ["Yaser Salama", "Yassir Salama", "Yasser Salameh", "Salama"],
        "aliases": ["salama", "سلامة", "salameh"],
    },
    {
        "id": "idrees-abkar",
        "name_ar": "إدريس أبكر",
        "variants_ar": ["الشيخ إدريس أبكر", "إدريس بن عبد الكريم أبكر"],
        "name_en": "Idrees Abkar",
        "variants_en": ["Idris Abkar", "Idrees Bukur", "Abkar"],
        "aliases": ["abkar", "أبكر"],
    },
    {
        "id": "mansour-al-salimi",
        "name_ar": "منصور السالمي",
        "variants_ar": ["الشيخ منصور السالمي"],
        "name_en": "Mansour Al-Salimi",
        "variants_en": [
            "Mansour Al Salimi",
            "Mansur Al-Salimi",
            "Mansour Alsalimi",
            "Al-Salimi",
            "Al Salimi",
            "Salimi",
        ],
        "aliases": ["salimi", "السالمي"],
    },
    {
        "id": "hazza-al-balushi",
        "name_ar": "هزاع البلوشي",
        "variants_ar": ["الشيخ هزاع البلوشي"],
        "name_en": "Hazza Al-Balushi",
        "variants_en": [
            "Hazza Al Balushi",
            "Haza Al-Balushi",
            "Hazza Albalushi",
            "Al-Balushi",
            "Al Balushi",
            "Balushi",
        ],
        "aliases": ["balushi", "البلوشي"],
    },
    {
        "id": "muhammad-al-majid",
        "name_ar": "محمد الماجد",
        "variants_ar": ["الشيخ محمد الماجد"],
        "name_en": "Muhammad Al-Majid",
        "variants_en": [
            "Mohammed Al-Majid",
            "Mohamed Al-Majid",
            "Muhammad Al Majid",
            "Mohammed Al Majid",
            "Al-Majid",
            "Al Majid",
            "Majid",
        ],
        "aliases": ["majid", "الماجد"],
    },
    {
        "id": "tawfeeq-as-sayegh",
        "name_ar": "توفيق الصايغ",
        "variants_ar": ["الشيخ توفيق الصايغ", "توفيق بن سعيد الصايغ"],
        "name_en": "Tawfeeq As-Sayegh",
        "variants_en": [
            "Tawfiq As-Sayegh",
            "Tawfeeq Al-Sayegh",
            "Tawfeeq As Sayegh",
            "Tawfiq As Sayegh",
            "As-Sayegh",
            "Al-Sayegh",
            "Sayegh",
        ],
        "aliases": ["sayegh", "الصايغ"],
    },
    {
        "id": "raad-al-kurdi",
        "name_ar": "رائد الكردي",
        "variants_ar": ["الشيخ رائد الكردي"],
        "name_en": "Raad Al-Kurdi",
        "variants_en": [
            "Raad Al Kurdi",
            "Raad Alkurdi",
            "Raed Al-Kurdi",
            "Rad Al-Kurdi",
            "Al-Kurdi",
            "Al Kurdi",
            "Kurdi",
        ],
        "aliases": ["kurdi", "الكردي"],
    },
    {
        "id": "omar-al-dinizaz",
        "name_ar": "عمر الدينيزاز",
        "variants_ar": ["الشيخ عمر الدينيزاز"],
        "name_en": "Omar Al-Dinizaz",
        "variants_en": [
            "Omar Al Dinizaz",
            "Umar Al-Dinizaz",
            "Omar Aldinizaz",
            "Al-Dinizaz",
            "Al Dinizaz",
            "Dinizaz",
        ],
        "aliases": ["dinizaz", "الدينيزاز"],
    },
    {
        "id": "abdul-wadud-haneef",
        "name_ar": "عبد الودود حنيف",
        "variants_ar": ["الشيخ عبد الودود حنيف"],
        "name_en": "Abdul Wadud Haneef",
        "variants_en": [
            "Abdulwadud Haneef",
            "Abdul Wadood Haneef",
            "Abdul Wadud Hanif",
            "Abdulwadud Hanif",
        ],
        "aliases": ["haneef", "حنيف", "wadud", "الودود"],
    },
    {
        "id": "ali-jaber",
        "name_ar": "علي جابر",
        "variants_ar": ["الشيخ علي جابر", "علي بن عبد الرحمن جابر"],
        "name_en": "Ali Jaber",
        "variants_en": ["Ali Jabir", "Ali Gaaber", "Jaber", "Jabir"],
        "aliases": ["jaber", "جابر", "jabir"],
    },
)
