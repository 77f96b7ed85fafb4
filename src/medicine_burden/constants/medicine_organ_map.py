# ============================================================================
# src/medicine_burden/constants/medicine_organ_map.py
# ============================================================================
"""
Medicine → Organ Mapping (educational purposes only)
- Canonical lowercase medicine id → organs it is known to load
- Illustrative, not a clinical knowledge base
"""

from .organs import OrganId

LIVER = OrganId.LIVER
KIDNEY = OrganId.KIDNEY
HEART = OrganId.HEART
STOMACH = OrganId.STOMACH
BRAIN = OrganId.BRAIN
LUNGS = OrganId.LUNGS
PANCREAS = OrganId.PANCREAS
INTESTINES = OrganId.INTESTINES

MEDICINE_ORGAN_MAP = {
    # Pain relievers
    "paracetamol": (LIVER,),
    "acetaminophen": (LIVER,),
    "ibuprofen": (KIDNEY, STOMACH),
    "aspirin": (STOMACH, KIDNEY),
    "naproxen": (KIDNEY, STOMACH),
    "diclofenac": (KIDNEY, STOMACH, LIVER),
    "celecoxib": (KIDNEY, HEART),

    # Cardiovascular
    "atorvastatin": (LIVER,),
    "simvastatin": (LIVER,),
    "rosuvastatin": (LIVER,),
    "lisinopril": (KIDNEY,),
    "enalapril": (KIDNEY,),
    "ramipril": (KIDNEY,),
    "amlodipine": (HEART,),
    "metoprolol": (HEART,),
    "atenolol": (HEART,),
    "propranolol": (HEART, BRAIN),
    "furosemide": (KIDNEY,),
    "hydrochlorothiazide": (KIDNEY,),
    "spironolactone": (KIDNEY,),
    "digoxin": (HEART, KIDNEY),
    "warfarin": (LIVER,),
    "clopidogrel": (STOMACH,),

    # Diabetes
    "metformin": (LIVER, KIDNEY),
    "glipizide": (PANCREAS, LIVER),
    "gliclazide": (PANCREAS, LIVER),
    "sitagliptin": (PANCREAS, KIDNEY),
    "empagliflozin": (KIDNEY,),
    "dapagliflozin": (KIDNEY,),
    "insulin": (PANCREAS,),

    # Antibiotics
    "amoxicillin": (LIVER, INTESTINES),
    "azithromycin": (LIVER,),
    "ciprofloxacin": (KIDNEY, INTESTINES),
    "levofloxacin": (KIDNEY,),
    "metronidazole": (LIVER, BRAIN),
    "doxycycline": (LIVER, STOMACH),
    "clarithromycin": (LIVER,),
    "gentamicin": (KIDNEY,),
    "vancomycin": (KIDNEY,),

    # CNS medications
    "sertraline": (LIVER, BRAIN),
    "fluoxetine": (LIVER, BRAIN),
    "escitalopram": (LIVER, BRAIN),
    "venlafaxine": (LIVER, BRAIN),
    "duloxetine": (LIVER, BRAIN),
    "amitriptyline": (HEART, BRAIN),
    "gabapentin": (KIDNEY, BRAIN),
    "pregabalin": (KIDNEY, BRAIN),
    "diazepam": (LIVER, BRAIN),
    "alprazolam": (LIVER, BRAIN),
    "zolpidem": (LIVER, BRAIN),
    "quetiapine": (LIVER, BRAIN, HEART),
    "risperidone": (LIVER, BRAIN),
    "olanzapine": (LIVER, BRAIN, PANCREAS),
    "lithium": (KIDNEY, BRAIN),
    "valproate": (LIVER, PANCREAS),
    "carbamazepine": (LIVER, BRAIN),
    "phenytoin": (LIVER, BRAIN),
    "levetiracetam": (KIDNEY, BRAIN),

    # GI medications
    "omeprazole": (LIVER, STOMACH),
    "pantoprazole": (LIVER, STOMACH),
    "lansoprazole": (LIVER, STOMACH),
    "esomeprazole": (LIVER, STOMACH),
    "ranitidine": (KIDNEY, STOMACH),
    "famotidine": (KIDNEY, STOMACH),
    "ondansetron": (LIVER,),
    "metoclopramide": (BRAIN, STOMACH),
    "loperamide": (INTESTINES,),
    "lactulose": (INTESTINES,),

    # Respiratory
    "salbutamol": (HEART, LUNGS),
    "albuterol": (HEART, LUNGS),
    "budesonide": (LUNGS,),
    "fluticasone": (LUNGS,),
    "montelukast": (LIVER, LUNGS),
    "theophylline": (HEART, LIVER, LUNGS),

    # Immunosuppressants
    "prednisone": (LIVER, STOMACH, PANCREAS),
    "prednisolone": (LIVER, STOMACH, PANCREAS),
    "dexamethasone": (LIVER, STOMACH, PANCREAS),
    "methotrexate": (LIVER, KIDNEY, LUNGS),
    "azathioprine": (LIVER,),
    "cyclosporine": (KIDNEY, LIVER),
    "tacrolimus": (KIDNEY, LIVER),

    # Others
    "allopurinol": (LIVER, KIDNEY),
    "colchicine": (LIVER, KIDNEY, INTESTINES),
    "levothyroxine": (HEART,),
    "sildenafil": (HEART, LIVER),
    "tamsulosin": (LIVER,),
    "finasteride": (LIVER,),
}
