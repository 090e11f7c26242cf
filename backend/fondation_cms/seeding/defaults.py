# fondation_cms/seeding/defaults.py
"""
Default bilingual content for the whole site.

This table is the only copy of the hard-coded site text: the seeder
stores it and page views fall back to it when nothing is stored.
"""
from __future__ import annotations

import copy
from typing import Dict, List, Optional

from fondation_cms.domain.records import (
    GlobalContent,
    MediaItem,
    NewsItem,
    PageContent,
    PageSection,
    Publication,
    Resource,
    TranslatedText,
    WebsiteStructure,
    translated as _t,
)


def _section(section_id, title_fr, title_ar, fr, ar, image=None) -> PageSection:
    section: PageSection = {
        "id": section_id,
        "title": _t(title_fr, title_ar),
        "content": _t(fr, ar),
    }
    if image:
        section["image"] = image
    return section


DEFAULT_PAGE_TITLES: Dict[str, TranslatedText] = {
    "home": _t("Accueil", "الرئيسية"),
    "about": _t("À Propos", "من نحن"),
    "programs": _t("Programmes", "البرامج"),
    "news": _t("Actualités", "الأخبار"),
    "resources": _t("Ressources", "الموارد"),
    "testimonials": _t("Témoignages", "الشهادات"),
    "review": _t("Revue & Publications", "المراجعة والمنشورات"),
    "contact": _t("Contact", "اتصل بنا"),
}

KNOWN_PAGE_IDS: List[str] = list(DEFAULT_PAGE_TITLES)


# ------------------------
# Home
# ------------------------

HOME_SECTIONS: List[PageSection] = [
    _section(
        "hero", "Bannière principale", "البانر الرئيسي",
        "Fondation pour la Promotion des Droits",
        "مؤسسة تعزيز الحقوق",
        image="/images/hero-background.jpg",
    ),
    _section(
        "slogan", "Notre slogan", "شعارنا",
        "Ensemble, pour des droits connus, reconnus et défendus.",
        "معاً، من أجل حقوق معروفة ومعترف بها ومحمية.",
    ),
    _section(
        "mission", "Notre mission", "مهمتنا",
        "Notre mission est de promouvoir et défendre les droits par la sensibilisation, la formation, "
        "la documentation des violations et le soutien aux acteurs de la société civile.",
        "مهمتنا هي تعزيز والدفاع عن الحقوق من خلال التوعية والتدريب وتوثيق الانتهاكات ودعم الفاعلين في المجتمع المدني.",
        image="/images/droits-egaux.jpg",
    ),
    _section(
        "droits_egaux", "Droits égaux", "حقوق متساوية",
        "\"La dignité humaine n'est pas un privilège accordé par l'État, mais un droit inhérent à chaque individu.\"",
        "\"الكرامة الإنسانية ليست امتيازاً تمنحه الدولة، بل هي حق متأصل في كل فرد.\"",
    ),
    _section(
        "objectives", "Nos objectifs", "أهدافنا",
        "La Fondation pour la promotion des droits poursuit les objectifs suivants pour concrétiser "
        "sa vision d'une société juste et respectueuse des droits fondamentaux.",
        "تسعى مؤسسة تعزيز الحقوق لتحقيق الأهداف التالية لتجسيد رؤيتها لمجتمع عادل يحترم الحقوق الأساسية.",
    ),
    _section(
        "impact", "Notre Impact", "تأثيرنا",
        "38+ Formations\n760+ Bénéficiaires\n25+ Partenaires\n\n"
        "Les chiffres qui reflètent notre engagement et notre impact dans la promotion et la défense des droits.",
        "+38 تدريب\n+760 مستفيد\n+25 شريك\n\n"
        "الأرقام التي تعكس التزامنا وتأثيرنا في تعزيز والدفاع عن الحقوق.",
    ),
    _section(
        "actualites", "Actualités Récentes", "آخر الأخبار",
        "Découvrez les dernières informations sur nos activités, projets et engagements.",
        "اكتشف أحدث المعلومات حول أنشطتنا ومشاريعنا والتزاماتنا.",
    ),
    _section(
        "objectifs_details", "Détails de nos objectifs", "تفاصيل أهدافنا",
        "Formations et recherches: Organiser des formations continues et des forums et réaliser des "
        "recherches et des études dans le domaine de la promotion des droits.\n\n"
        "Sensibilisation et médias: Réaliser toute activité de sensibilisation et médiatique liée à la "
        "promotion des droits pour informer et éduquer le public.\n\n"
        "Construction d'un État de droit: Contribuer et œuvrer à la construction d'un État de droit en "
        "exhortant les citoyens à s'engager à faire appliquer et respecter la loi et à promouvoir les droits.",
        "التدريب والبحث: تنظيم دورات تدريبية مستمرة ومنتديات وإجراء بحوث ودراسات في مجال تعزيز الحقوق.\n\n"
        "التوعية والإعلام: تنفيذ جميع أنشطة التوعية والإعلام المتعلقة بتعزيز الحقوق لإعلام وتثقيف الجمهور.\n\n"
        "بناء دولة القانون: المساهمة والعمل على بناء دولة القانون من خلال حث المواطنين على الالتزام بتطبيق واحترام القانون وتعزيز الحقوق.",
    ),
    _section(
        "mission_details", "Détails de notre mission", "تفاصيل مهمتنا",
        "Promotion des principes démocratiques et de l'état de droit\n"
        "Protection des droits des populations vulnérables\n"
        "Éducation et sensibilisation aux droits\n"
        "Renforcement des capacités de la société civile",
        "تعزيز المبادئ الديمقراطية وسيادة القانون\n"
        "حماية حقوق الفئات الضعيفة\n"
        "التعليم والتوعية بالحقوق\n"
        "تعزيز قدرات المجتمع المدني",
    ),
    _section(
        "programmes", "Nos Programmes", "برامجنا",
        "Découvrez les différents programmes à travers lesquels nous travaillons pour promouvoir et "
        "protéger les droits fondamentaux.\n\n"
        "Éducation aux droits: Sensibilisation et formation aux principes des droits fondamentaux pour "
        "différents publics.\n\n"
        "Assistance juridique: Soutien juridique aux individus et organisations dans la défense de leurs droits.\n\n"
        "Plaidoyer: Actions de plaidoyer auprès des décideurs pour l'amélioration des politiques liées aux droits.",
        "اكتشف البرامج المختلفة التي نعمل من خلالها على تعزيز وحماية الحقوق الأساسية.\n\n"
        "التثقيف بالحقوق: التوعية والتدريب على مبادئ الحقوق الأساسية لمختلف الجماهير.\n\n"
        "المساعدة القانونية: الدعم القانوني للأفراد والمنظمات في الدفاع عن حقوقهم.\n\n"
        "المناصرة: أنشطة المناصرة مع صناع القرار لتحسين السياسات المتعلقة بالحقوق.",
    ),
    _section(
        "identite_visuelle", "Notre identité visuelle", "هويتنا البصرية",
        "Notre identité visuelle reflète nos valeurs d'équilibre, de durabilité et d'action positive. "
        "Les couleurs de notre logo représentent notre engagement envers ces principes.\n\n"
        "Turquoise: R60 / V180 / B150 #3cb496\nOrange: R243 / V146 / B7 #f39207",
        "تعكس هويتنا البصرية قيمنا المتمثلة في التوازن والاستدامة والعمل الإيجابي. "
        "تمثل ألوان شعارنا التزامنا بهذه المبادئ.\n\n"
        "تركواز: R60 / V180 / B150 #3cb496\nبرتقالي: R243 / V146 / B7 #f39207",
    ),
    _section(
        "newsletter", "Restez informé(e)", "ابق على اطلاع",
        "Inscrivez-vous à notre newsletter pour recevoir les dernières actualités, publications et "
        "événements de la Fondation pour la promotion des droits.",
        "اشترك في نشرتنا الإخبارية لتلقي آخر الأخبار والمنشورات والفعاليات من مؤسسة تعزيز الحقوق.",
    ),
]

HOME_REQUIRED_SECTION_IDS: List[str] = [section["id"] for section in HOME_SECTIONS]


# ------------------------
# About
# ------------------------

ABOUT_REQUIRED_SECTIONS: List[PageSection] = [
    _section(
        "intro", "Introduction", "مقدمة",
        "Découvrez notre mission, nos valeurs et notre équipe dédiée à la promotion et à la défense des droits humains.",
        "اكتشف مهمتنا وقيمنا وفريقنا المكرس لتعزيز وحماية حقوق الإنسان.",
    ),
    _section(
        "mission", "Notre mission", "مهمتنا",
        "Notre mission principale est de contribuer à la construction d'un État de droit solide et inclusif. "
        "Pour cela, nous mettons en place des actions de plaidoyer, des campagnes de sensibilisation, des "
        "formations juridiques et des programmes d'éducation civique. Nous exhortons les citoyennes et citoyens "
        "à s'engager activement, à faire respecter la loi et à défendre leurs droits avec responsabilité et solidarité.",
        "مهمتنا هي تعزيز والدفاع عن الحقوق من خلال التوعية والتدريب وتوثيق الانتهاكات ودعم الفاعلين في المجتمع المدني.",
    ),
    _section(
        "vision", "Notre vision", "رؤيتنا",
        "\"Contribuer à l'édification d'une société où la dignité humaine est respectée et où les droits "
        "sont garantis pour tous, sans discrimination.\"",
        "\"المساهمة في بناء مجتمع تُحترم فيه كرامة الإنسان وتُضمن فيه الحقوق للجميع، دون تمييز.\"",
    ),
    _section(
        "justice", "Justice et Droits", "العدالة والحقوق",
        "Face aux défis, nous restons engagés et mobilisés pour faire avancer la justice et promouvoir "
        "le respect des droits fondamentaux.",
        "في مواجهة التحديات، نبقى ملتزمين ومجندين لدفع العدالة وتعزيز احترام الحقوق الأساسية.",
        image="/images/law/justice-law-scales.jpg",
    ),
    _section(
        "objectives", "Nos objectifs", "أهدافنا",
        "Contribuer et œuvrer à la construction d'un État de droit en exhortant les citoyens à s'engager "
        "à faire appliquer et respecter la loi et à promouvoir les droits.",
        "المساهمة والعمل على بناء دولة القانون من خلال حث المواطنين على الالتزام بتطبيق واحترام القانون وتعزيز الحقوق.",
    ),
    _section(
        "objectives_intro", "Introduction aux objectifs", "مقدمة الأهداف",
        "La Fondation pour la promotion des droits poursuit les objectifs suivants pour concrétiser sa "
        "vision d'une société juste et respectueuse des droits fondamentaux.",
        "تسعى مؤسسة تعزيز الحقوق لتحقيق الأهداف التالية لتجسيد رؤيتها لمجتمع عادل يحترم الحقوق الأساسية.",
    ),
    _section(
        "target_audience", "Notre public cible", "جمهورنا المستهدف",
        "Nos actions et programmes sont conçus pour répondre aux besoins spécifiques de différentes "
        "catégories de personnes concernées par les droits humains.",
        "تم تصميم إجراءاتنا وبرامجنا لتلبية الاحتياجات المحددة لمختلف فئات الأشخاص المعنيين بحقوق الإنسان.",
    ),
    _section(
        "history", "Notre histoire", "تاريخنا",
        "Notre histoire est avant tout celle d'un engagement collectif. Face aux défis persistants liés au "
        "respect des droits fondamentaux, nous avons choisi d'unir nos expertises et nos convictions pour "
        "créer une structure indépendante, transparente et active. Depuis sa création, la Fondation œuvre "
        "pour renforcer la culture des droits humains, sensibiliser les citoyennes et citoyens à leurs droits "
        "et devoirs, et promouvoir une société fondée sur la loi, la justice et l'égalité.",
        "تاريخنا هو قبل كل شيء تاريخ التزام جماعي. في مواجهة التحديات المستمرة المرتبطة باحترام الحقوق "
        "الأساسية، اخترنا توحيد خبراتنا وقناعاتنا لإنشاء هيكل مستقل وشفاف ونشط.",
    ),
    _section(
        "founder", "Mot du Gérant", "كلمة المدير",
        "C'est avec une grande fierté et une profonde conviction que je vous adresse ces quelques mots en "
        "tant que gérant de la Fondation pour la promotion des droits. Notre monde traverse une période où "
        "les droits fondamentaux sont souvent remis en question, ignorés, voire bafoués. Face à ces défis, "
        "il est impératif de ne pas rester silencieux.",
        "بكل فخر وقناعة عميقة أخاطبكم بهذه الكلمات القليلة كمدير لمؤسسة تعزيز الحقوق. يمر عالمنا بفترة "
        "يتم فيها غالبًا التشكيك في الحقوق الأساسية أو تجاهلها أو حتى انتهاكها. في مواجهة هذه التحديات، "
        "من الضروري عدم البقاء صامتين.",
        image="/images/zakaria.jpg",
    ),
]


# ------------------------
# Other pages
# ------------------------

PROGRAMS_SECTIONS: List[PageSection] = [
    _section(
        "intro", "Nos Programmes", "برامجنا",
        "Découvrez les différents programmes à travers lesquels nous travaillons pour promouvoir et "
        "protéger les droits fondamentaux.",
        "اكتشف البرامج المختلفة التي نعمل من خلالها على تعزيز وحماية الحقوق الأساسية.",
    ),
    _section(
        "research", "Recherche & Documentation", "البحث والتوثيق",
        "Notre programme de recherche documente systématiquement les situations des droits humains et mène "
        "des études sur les questions liées aux droits pour informer le plaidoyer et le développement des politiques.",
        "يوثق برنامج البحث لدينا بشكل منهجي حالات حقوق الإنسان ويجري دراسات حول القضايا المتعلقة بالحقوق "
        "لإثراء المناصرة وتطوير السياسات.",
        image="/images/programs/research.jpg",
    ),
    _section(
        "training", "Formation & Éducation", "التدريب والتعليم",
        "Nous renforçons les compétences des défenseurs des droits, des organisations de la société civile "
        "et du grand public grâce à des ateliers, des formations et des ressources éducatives.",
        "نقوم بتعزيز مهارات المدافعين عن الحقوق والمنظمات المجتمعية والجمهور العام من خلال ورش العمل "
        "والتدريبات والموارد التعليمية.",
        image="/images/programs/training.jpg",
    ),
    _section(
        "advocacy", "Plaidoyer & Campagnes", "المناصرة والحملات",
        "Nous défendons des changements systémiques en engageant les décideurs politiques, en sensibilisant "
        "le public et en mobilisant des actions collectives pour les droits fondamentaux.",
        "ندافع عن التغييرات المنهجية من خلال إشراك صناع السياسات ورفع الوعي العام وتعبئة العمل الجماعي "
        "للحقوق الأساسية.",
        image="/images/programs/advocacy.jpg",
    ),
]

TESTIMONIALS_SECTIONS: List[PageSection] = [
    _section(
        "intro", "Témoignages", "الشهادات",
        "Découvrez ce que nos bénéficiaires, partenaires et volontaires disent de notre travail",
        "اكتشف ما يقوله المستفيدون وشركاؤنا ومتطوعونا عن عملنا",
    ),
    _section(
        "header", "Ce qu'ils disent de nous", "ما يقولونه عنا",
        "Voici les témoignages de personnes et d'organisations qui ont bénéficié de nos programmes et "
        "collaboré avec nous.",
        "فيما يلي شهادات من الأشخاص والمنظمات التي استفادت من برامجنا وتعاونت معنا.",
    ),
    _section(
        "categories", "Catégories", "الفئات",
        "Tous\nBénéficiaires\nPartenaires\nVolontaires\nExperts",
        "الكل\nالمستفيدون\nالشركاء\nالمتطوعون\nالخبراء",
    ),
    _section(
        "coming_soon", "Témoignages à venir", "شهادات قادمة",
        "Nous sommes en train de recueillir des témoignages de nos bénéficiaires, partenaires et volontaires. "
        "Revenez bientôt pour découvrir leurs expériences avec notre fondation.",
        "نحن نجمع الشهادات من المستفيدين وشركائنا ومتطوعينا. عد قريبًا لاكتشاف تجاربهم مع مؤسستنا.",
    ),
    _section(
        "share", "Partagez votre expérience", "شارك تجربتك",
        "Avez-vous participé à l'un de nos programmes ou collaboré avec nous ? Nous serions ravis "
        "d'entendre votre histoire.",
        "هل شاركت في أحد برامجنا أو تعاونت معنا؟ يسعدنا سماع قصتك.",
    ),
    _section(
        "form", "Formulaire de témoignage", "نموذج الشهادة",
        "Nom complet\nEmail\nOrganisation\nRôle / Fonction\nVotre expérience avec nous\n"
        "Partagez votre expérience en détail...\nVotre évaluation\nSoumettre votre témoignage",
        "الاسم الكامل\nالبريد الإلكتروني\nالمنظمة\nالدور / الوظيفة\nتجربتك معنا\n"
        "شارك تجربتك بالتفصيل...\nتقييمك\nإرسال شهادتك",
    ),
]

REVIEW_SECTIONS: List[PageSection] = [
    _section(
        "intro", "Revue & Publications", "المراجعة والمنشورات",
        "Explorez nos analyses et publications sur les droits humains et les enjeux juridiques actuels",
        "استكشف تحليلاتنا ومنشوراتنا حول حقوق الإنسان والقضايا القانونية الحالية",
    ),
    _section(
        "coming_soon", "Notre première revue arrive en juillet 2025 !", "تصدر مجلتنا الأولى في يوليو 2025!",
        "Nous avons le plaisir de vous annoncer que la première édition de notre revue sera publiée en "
        "juillet 2025. Cette revue trimestrielle abordera les questions juridiques, les droits humains et "
        "les enjeux sociaux actuels.",
        "يسرنا أن نعلن أن العدد الأول من مجلتنا سيصدر في يوليو 2025. ستتناول هذه المجلة الفصلية القضايا "
        "القانونية وحقوق الإنسان والقضايا الاجتماعية الحالية.",
    ),
    _section(
        "contribution", "Vous souhaitez contribuer ?", "هل ترغب في المساهمة؟",
        "Nous invitons les chercheurs, juristes, académiciens et experts à contribuer à notre revue. Si vous "
        "souhaitez soumettre un article ou partager votre expertise, n'hésitez pas à nous contacter via notre "
        "formulaire de contact ou sur nos réseaux sociaux.",
        "ندعو الباحثين والمحامين والأكاديميين والخبراء للمساهمة في مجلتنا. إذا كنت ترغب في تقديم مقالة أو "
        "مشاركة خبرتك، فلا تتردد في الاتصال بنا من خلال نموذج الاتصال الخاص بنا أو على وسائل التواصل الاجتماعي.",
    ),
    _section(
        "recent_publications", "Publications récentes", "المنشورات الحديثة",
        "Découvrez l'ensemble de nos ressources documentaires sur les droits humains et les questions juridiques.",
        "اكتشف جميع مواردنا الوثائقية حول حقوق الإنسان والقضايا القانونية.",
    ),
    _section(
        "media_library", "Médiathèque", "مكتبة الوسائط",
        "Explorez notre collection de ressources audiovisuelles sur les droits humains.",
        "استكشف مجموعتنا من الموارد السمعية البصرية حول حقوق الإنسان.",
    ),
    _section(
        "featured", "Publication à la une", "المنشور المميز",
        "Notre rapport annuel présente un aperçu complet de l'état des droits humains en Algérie.\n\n"
        "Rapport annuel 2023\nMai 2023 | 120 pages\n"
        "Ce rapport présente un aperçu complet de l'état des droits humains en Algérie en 2023. Il aborde "
        "les avancées et défis dans différents domaines, notamment les libertés civiles, les droits "
        "économiques et sociaux, et l'accès à la justice.",
        "يقدم تقريرنا السنوي نظرة شاملة عن حالة حقوق الإنسان في الجزائر.\n\n"
        "التقرير السنوي 2023\nمايو 2023 | 120 صفحة\n"
        "يقدم هذا التقرير نظرة شاملة عن حالة حقوق الإنسان في الجزائر في عام 2023. ويتناول التقدم "
        "والتحديات في مختلف المجالات، بما في ذلك الحريات المدنية والحقوق الاقتصادية والاجتماعية والوصول إلى العدالة.",
    ),
]

CONTACT_SECTIONS: List[PageSection] = [
    _section(
        "contact_info", "Nos coordonnées", "معلومات الاتصال",
        "Pour toute question ou information complémentaire, n'hésitez pas à nous contacter par email, "
        "téléphone ou en remplissant le formulaire ci-dessous.",
        "لأي استفسار أو معلومات إضافية، لا تتردد في التواصل معنا عبر البريد الإلكتروني أو الهاتف أو عن طريق ملء النموذج أدناه.",
    ),
    _section(
        "address", "Adresse", "العنوان",
        "123 Avenue de la République\nAlger, Algérie",
        "123 شارع الجمهورية\nالجزائر، الجزائر",
    ),
    _section("email", "Email", "البريد الإلكتروني", "contact@fondation-droits.org", "contact@fondation-droits.org"),
    _section("phone", "Téléphone", "الهاتف", "+213 12 345 6789", "+213 12 345 6789"),
    _section("hours", "Heures d'ouverture", "ساعات العمل", "Lundi - Vendredi: 9h00 - 17h00", "الاثنين - الجمعة: 9:00 - 17:00"),
]

DEFAULT_PAGES: Dict[str, PageContent] = {
    "home": {"id": "home", "title": DEFAULT_PAGE_TITLES["home"], "sections": HOME_SECTIONS},
    "about": {"id": "about", "title": DEFAULT_PAGE_TITLES["about"], "sections": ABOUT_REQUIRED_SECTIONS},
    "programs": {"id": "programs", "title": _t("Nos Programmes", "برامجنا"), "sections": PROGRAMS_SECTIONS},
    "testimonials": {"id": "testimonials", "title": DEFAULT_PAGE_TITLES["testimonials"], "sections": TESTIMONIALS_SECTIONS},
    "review": {"id": "review", "title": DEFAULT_PAGE_TITLES["review"], "sections": REVIEW_SECTIONS},
    "contact": {"id": "contact", "title": _t("Contactez-nous", "اتصل بنا"), "sections": CONTACT_SECTIONS},
}


def generic_page(page_id: str) -> Optional[PageContent]:
    """One-section template for known pages without a hand-written one."""
    title = DEFAULT_PAGE_TITLES.get(page_id)
    if title is None:
        return None

    return {
        "id": page_id,
        "title": dict(title),
        "sections": [
            {
                "id": "1",
                "title": dict(title),
                "content": _t(
                    f"Contenu de la page {title['fr']}",
                    f"محتوى صفحة {title['ar']}",
                ),
            }
        ],
    }


def default_page(page_id: str) -> Optional[PageContent]:
    """Fresh copy of the default content for `page_id`, or None if unknown."""
    if page_id in DEFAULT_PAGES:
        return copy.deepcopy(DEFAULT_PAGES[page_id])
    return generic_page(page_id)


def default_section_text(page_id: str, section_id: str, field: str, language: str) -> Optional[str]:
    """Default literal for one field of one section, used as a view fallback."""
    page = DEFAULT_PAGES.get(page_id) or generic_page(page_id)
    if not page:
        return None

    for section in page["sections"]:
        if section["id"] == section_id:
            value = section.get(field)
            if isinstance(value, dict):
                return value.get(language)
            return value
    return None


# ------------------------
# Website structure
# ------------------------

WEBSITE_STRUCTURE: WebsiteStructure = {
    "pages": ["home", "about", "programs", "news", "resources", "contact", "testimonials", "review"],
    "mainMenu": [
        {"id": "home", "title": DEFAULT_PAGE_TITLES["home"], "href": "/"},
        {"id": "about", "title": DEFAULT_PAGE_TITLES["about"], "href": "/about"},
        {"id": "programs", "title": DEFAULT_PAGE_TITLES["programs"], "href": "/programs"},
        {"id": "news", "title": DEFAULT_PAGE_TITLES["news"], "href": "/news"},
        {"id": "resources", "title": DEFAULT_PAGE_TITLES["resources"], "href": "/resources"},
        {"id": "review", "title": DEFAULT_PAGE_TITLES["review"], "href": "/review"},
        {"id": "testimonials", "title": DEFAULT_PAGE_TITLES["testimonials"], "href": "/testimonials"},
        {"id": "contact", "title": DEFAULT_PAGE_TITLES["contact"], "href": "/contact"},
    ],
    "footer": [
        {
            "id": "about",
            "title": _t("À propos de nous", "عن المؤسسة"),
            "content": _t(
                "La Fondation pour la promotion des droits est une organisation indépendante dédiée à la "
                "promotion et la protection des droits fondamentaux.",
                "مؤسسة تعزيز الحقوق هي منظمة مستقلة مكرسة لتعزيز وحماية الحقوق الأساسية.",
            ),
        },
        {
            "id": "links",
            "title": _t("Liens rapides", "روابط سريعة"),
            "links": [
                {"text": DEFAULT_PAGE_TITLES["home"], "href": "/"},
                {"text": DEFAULT_PAGE_TITLES["about"], "href": "/about"},
                {"text": DEFAULT_PAGE_TITLES["programs"], "href": "/programs"},
                {"text": DEFAULT_PAGE_TITLES["news"], "href": "/news"},
                {"text": DEFAULT_PAGE_TITLES["resources"], "href": "/resources"},
                {"text": DEFAULT_PAGE_TITLES["review"], "href": "/review"},
                {"text": DEFAULT_PAGE_TITLES["testimonials"], "href": "/testimonials"},
                {"text": DEFAULT_PAGE_TITLES["contact"], "href": "/contact"},
            ],
        },
        {
            "id": "contact",
            "title": DEFAULT_PAGE_TITLES["contact"],
            "content": _t(
                "Email: contact@fondation-droits.org\nAdresse: 123 Avenue de la République, Alger, Algérie",
                "البريد الإلكتروني: contact@fondation-droits.org\nالعنوان: 123 شارع الجمهورية، الجزائر، الجزائر",
            ),
        },
    ],
}


# ------------------------
# Global UI strings
# ------------------------

def _global(item_id, category, key, fr, ar, image=None) -> GlobalContent:
    item: GlobalContent = {"id": item_id, "category": category, "key": key, "text": _t(fr, ar)}
    if image:
        item["image"] = image
    return item


GLOBAL_CONTENT: List[GlobalContent] = [
    _global("btn_read_more", "buttons", "read_more", "Lire la suite", "قراءة المزيد"),
    _global("btn_submit", "buttons", "submit", "Soumettre", "إرسال"),
    _global("btn_download", "buttons", "download", "Télécharger", "تحميل"),
    _global("btn_search", "buttons", "search", "Rechercher", "بحث"),
    _global("btn_subscribe", "buttons", "subscribe", "S'abonner", "اشتراك"),
    _global("nav_prev", "navigation", "previous", "Précédent", "السابق"),
    _global("nav_next", "navigation", "next", "Suivant", "التالي"),
    _global("nav_back", "navigation", "back", "Retour", "رجوع"),
    _global("label_name", "labels", "name", "Nom", "الاسم"),
    _global("label_email", "labels", "email", "Email", "البريد الإلكتروني"),
    _global("label_phone", "labels", "phone", "Téléphone", "الهاتف"),
    _global("label_message", "labels", "message", "Message", "الرسالة"),
    _global("label_date", "labels", "date", "Date", "التاريخ"),
    _global("label_author", "labels", "author", "Auteur", "الكاتب"),
    _global("label_category", "labels", "category", "Catégorie", "الفئة"),
    _global("error_required", "errors", "required", "Ce champ est requis", "هذا الحقل مطلوب"),
    _global("error_invalid_email", "errors", "invalid_email", "Email invalide", "البريد الإلكتروني غير صالح"),
    _global("success_contact_sent", "success", "contact_sent",
            "Votre message a été envoyé avec succès", "تم إرسال رسالتك بنجاح"),
    _global("section_recent_news", "sections", "recent_news", "Actualités récentes", "آخر الأخبار"),
    _global("section_featured_resources", "sections", "featured_resources", "Ressources en vedette", "موارد مميزة"),
    _global("section_testimonials", "sections", "testimonials", "Témoignages", "شهادات"),
    _global("section_partners", "sections", "partners", "Nos partenaires", "شركاؤنا"),
    _global("social_follow", "social", "follow_us", "Suivez-nous", "تابعنا"),
    _global("social_share", "social", "share", "Partager", "مشاركة"),
    _global("img_logo", "images", "logo", "Logo de la Fondation", "شعار المؤسسة", image="/images/logo.png"),
    _global("img_banner", "images", "banner", "Bannière principale", "الشعار الرئيسي",
            image="/images/hero-background.jpg"),
]


# ------------------------
# Media library
# ------------------------

def media_library(upload_date: str) -> List[MediaItem]:
    """Sample media catalog, stamped with `upload_date` (YYYY-MM-DD)."""
    entries = [
        ("media_1", "Hero Background", "/images/hero-background.jpg",
         "Arrière-plan de la bannière principale", "خلفية البانر الرئيسي", ["hero", "banner", "background"]),
        ("media_2", "Droits Egaux", "/images/droits-egaux.jpg",
         "Droits égaux pour tous", "حقوق متساوية للجميع", ["rights", "equality"]),
        ("media_3", "Justice Law Scales", "/images/law/justice-law-scales.jpg",
         "Balance de la justice", "ميزان العدالة", ["justice", "law"]),
        ("media_4", "Research Program", "/images/programs/research.jpg",
         "Programme de recherche", "برنامج البحث", ["programs", "research"]),
        ("media_5", "Training Program", "/images/programs/training.jpg",
         "Programme de formation", "برنامج التدريب", ["programs", "training"]),
        ("media_6", "Advocacy Program", "/images/programs/advocacy.jpg",
         "Programme de plaidoyer", "برنامج المناصرة", ["programs", "advocacy"]),
    ]
    return [
        {
            "id": item_id,
            "name": name,
            "path": path,
            "url": path,
            "type": "image",
            "alt": _t(alt_fr, alt_ar),
            "tags": tags,
            "uploadDate": upload_date,
        }
        for item_id, name, path, alt_fr, alt_ar, tags in entries
    ]


# ------------------------
# News, resources, publications
# ------------------------

NEWS_ITEMS: List[NewsItem] = [
    {
        "id": 1,
        "title": _t("Lancement de notre nouvelle plateforme de formation en ligne",
                    "إطلاق منصة التدريب عبر الإنترنت الجديدة"),
        "date": _t("15 mai 2023", "15 مايو 2023"),
        "author": _t("Équipe de la Fondation", "فريق المؤسسة"),
        "category": _t("Formation", "تدريب"),
        "excerpt": _t(
            "Notre nouvelle plateforme permet désormais d'accéder à des formations de qualité sur les "
            "droits fondamentaux, partout et à tout moment.",
            "تتيح منصتنا الجديدة الآن الوصول إلى تدريب عالي الجودة حول الحقوق الأساسية، في أي مكان وفي أي وقت.",
        ),
        "image": "/images/news/elearning.jpg",
        "slug": "lancement-plateforme-formation",
        "content": "Contenu détaillé de l'article de blog...",
    },
    {
        "id": 2,
        "title": _t("Rapport annuel 2023 sur les droits et libertés", "التقرير السنوي 2023 عن الحقوق والحريات"),
        "date": _t("20 avril 2023", "20 أبريل 2023"),
        "author": _t("Service de recherche", "قسم البحث"),
        "category": _t("Rapport", "تقرير"),
        "excerpt": _t(
            "Notre rapport annuel présente une analyse détaillée de la situation des droits et des "
            "libertés au cours de l'année écoulée.",
            "يقدم تقريرنا السنوي تحليلاً مفصلاً لحالة الحقوق والحريات خلال العام الماضي.",
        ),
        "image": "/images/news/report.jpg",
        "slug": "rapport-annuel-2023",
        "content": "Contenu détaillé du rapport annuel...",
    },
    {
        "id": 3,
        "title": _t("Conférence internationale sur les droits des femmes", "المؤتمر الدولي لحقوق المرأة"),
        "date": _t("8 mars 2023", "8 مارس 2023"),
        "author": _t("Département événements", "قسم الفعاليات"),
        "category": _t("Événement", "حدث"),
        "excerpt": _t(
            "Notre fondation a participé à la conférence internationale sur les droits des femmes, "
            "présentant nos dernières recherches et initiatives.",
            "شاركت مؤسستنا في المؤتمر الدولي لحقوق المرأة، حيث قدمت أحدث أبحاثنا ومبادراتنا.",
        ),
        "image": "/images/news/women-rights.jpg",
        "slug": "conference-droits-femmes",
        "content": "Compte rendu détaillé de la conférence...",
    },
]

RESOURCES: List[Resource] = [
    {
        "id": 1,
        "title": _t("Guide des droits fondamentaux", "دليل الحقوق الأساسية"),
        "description": _t(
            "Un guide complet expliquant les droits fondamentaux dans un langage accessible à tous.",
            "دليل شامل يشرح الحقوق الأساسية بلغة يسهل فهمها للجميع.",
        ),
        "type": "guide",
        "format": "pdf",
        "thumbnail": "/images/resources/guide-thumbnail.jpg",
        "downloadUrl": "/downloads/guide-droits-fondamentaux.pdf",
        "date": _t("10 janvier 2023", "10 يناير 2023"),
        "fileSize": "2.4 MB",
        "featured": True,
    },
    {
        "id": 2,
        "title": _t("Modèles de lettres juridiques", "نماذج الرسائل القانونية"),
        "description": _t(
            "Ensemble de modèles de lettres pour différentes situations juridiques courantes.",
            "مجموعة من نماذج الرسائل للمواقف القانونية المختلفة الشائعة.",
        ),
        "type": "template",
        "format": "docx",
        "thumbnail": "/images/resources/templates-thumbnail.jpg",
        "downloadUrl": "/downloads/modeles-lettres-juridiques.zip",
        "date": _t("15 février 2023", "15 فبراير 2023"),
        "fileSize": "1.8 MB",
    },
    {
        "id": 3,
        "title": _t("Rapport sur la liberté d'expression", "تقرير عن حرية التعبير"),
        "description": _t(
            "Analyse approfondie de l'état de la liberté d'expression et des défis actuels.",
            "تحليل متعمق لحالة حرية التعبير والتحديات الحالية.",
        ),
        "type": "report",
        "format": "pdf",
        "thumbnail": "/images/resources/report-thumbnail.jpg",
        "downloadUrl": "/downloads/rapport-liberte-expression.pdf",
        "date": _t("22 mars 2023", "22 مارس 2023"),
        "fileSize": "3.6 MB",
        "featured": True,
    },
]

PUBLICATIONS: List[Publication] = [
    {
        "id": 1,
        "title": _t("Rapport annuel 2023", "التقرير السنوي 2023"),
        "date": _t("Mai 2023", "مايو 2023"),
        "excerpt": _t(
            "Ce rapport présente un aperçu complet de l'état des droits humains en Algérie en 2023.",
            "يقدم هذا التقرير نظرة شاملة عن حالة حقوق الإنسان في الجزائر في عام 2023.",
        ),
        "category": {"id": "droits-humains", "fr": "Rapport annuel", "ar": "التقرير السنوي"},
        "type": {"id": "rapports", "fr": "Rapport", "ar": "تقرير"},
        "pages": 120,
        "slug": "/review/rapport-annuel-2023",
        "pdfUrl": "/documents/rapport-annuel-2023.pdf",
        "featured": True,
    },
    {
        "id": 2,
        "title": _t("État des lieux de l'égalité des genres", "واقع المساواة بين الجنسين"),
        "date": _t("Mars 2023", "مارس 2023"),
        "excerpt": _t(
            "Analyse des progrès réalisés et des défis persistants en matière d'égalité hommes-femmes.",
            "تحليل التقدم المحرز والتحديات المستمرة في مجال المساواة بين الجنسين.",
        ),
        "category": {"id": "droits-humains", "fr": "Rapport", "ar": "تقرير"},
        "type": {"id": "rapports", "fr": "Rapport", "ar": "تقرير"},
        "pages": 45,
        "slug": "/review/egalite-genres",
        "pdfUrl": "/documents/egalite-genres.pdf",
    },
    {
        "id": 3,
        "title": _t("Guide pratique des droits de l'enfant", "دليل عملي لحقوق الطفل"),
        "date": _t("Février 2023", "فبراير 2023"),
        "excerpt": _t(
            "Ressource complète pour parents, éducateurs et professionnels travaillant avec les enfants.",
            "مورد شامل للآباء والمعلمين والمختصين العاملين مع الأطفال.",
        ),
        "category": {"id": "social", "fr": "Guide", "ar": "دليل"},
        "type": {"id": "guides", "fr": "Guide", "ar": "دليل"},
        "pages": 85,
        "slug": "/review/guide-droits-enfant",
        "pdfUrl": "/documents/guide-droits-enfant.pdf",
    },
]
