"""
Common Quranic terms searched alongside reciters and surahs.
"""

QURAN_TERMS = (
    {
        "id": "quran",
        "name_ar": "القرآن",
        "variants_ar": ["القران", "قرآن", "القرآن الكريم", "المصحف"],
        "name_en": "Quran",
        "variants_en": ["Koran", "Qur'an", "Al-Quran", "Holy Quran", "Quran Kareem"],
    },
    {
        "id": "surah",
        "name_ar": "سورة",
        "variants_ar": ["السورة", "سور"],
        "name_en": "Surah",
        "variants_en": ["Sura", "Surat", "Chapter"],
    },
    {
        "id": "ayat",
        "name_ar": "آيات",
        "variants_ar": ["آية", "الآيات", "الآية"],
        "name_en": "Ayat",
        "variants_en": ["Ayah", "Aya", "Verses", "Verse"],
    },
    {
        "id": "tajweed",
        "name_ar": "تجويد",
        "variants_ar": ["التجويد", "أحكام التجويد"],
        "name_en": "Tajweed",
        "variants_en": ["Tajwid", "Tajweed Rules"],
    },
    {
        "id": "tilawah",
        "name_ar": "تلاوة",
        "variants_ar": ["التلاوة", "قراءة"],
        "name_en": "Tilawah",
        "variants_en": ["Tilawa", "Recitation", "Reading"],
    },
    {
        "id": "juz",
        "name_ar": "جزء",
        "variants_ar": ["الجزء", "أجزاء"],
        "name_en": "Juz",
        "variants_en": ["Juzz", "Para", "Part"],
    },
    {
        "id": "hizb",
        "name_ar": "حزب",
        "variants_ar": ["الحزب", "أحزاب"],
        "name_en": "Hizb",
        "variants_en": ["Hezb", "Half Juz"],
    },
)
